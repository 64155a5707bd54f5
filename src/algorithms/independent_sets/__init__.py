from .bron_kerbosch import BronKerbosch, BronKerboschConfig
