"""Food Paradise: backend de commande (auth par token, panier, règlement des paiements, statistiques)."""
