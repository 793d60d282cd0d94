"""Interface ligne de commande (Typer + Rich) : écrans inscription, connexion, accueil."""
