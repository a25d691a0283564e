"""Application layer: casos de uso que orquestan puertos del dominio."""
