"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, HTTP, stockage).

Sous-packages :
- entities/ : Entités métier (Identity, UserProfile, ProfileView, ProfileLoad)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- exceptions : Hiérarchie des erreurs remontées à la présentation
"""
