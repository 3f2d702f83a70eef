"""Core de GeoSpoofer: dominio, contratos y orquestación."""
