"""
Couche adaptateurs : codec CSV et interface en ligne de commande.
"""
