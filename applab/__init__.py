"""
Applab - Client d'inscription, de connexion et de profil utilisateur.

Ce package orchestre l'inscription par email/mot de passe, la connexion et la
lecture du profil utilisateur en s'appuyant sur un service d'identite et un
stockage de documents externes (Firebase Authentication et Realtime Database).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (validation, orchestration des flux)
- adapters/ : Couche infrastructure (CLI, clients Firebase)
"""

__version__ = "0.1.0"
