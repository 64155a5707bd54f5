from .dsatur import DSatur
