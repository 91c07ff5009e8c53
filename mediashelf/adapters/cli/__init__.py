"""
Interface en ligne de commande (Typer + Rich).
"""
