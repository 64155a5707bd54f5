from .prim import Prim
