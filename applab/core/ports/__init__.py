"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- IIdentityService : Création, vérification et session des identifiants
- IDocumentStore : Écriture et lecture ponctuelle de documents par clé
"""

from applab.core.ports.document_store import IDocumentStore
from applab.core.ports.identity import IIdentityService

__all__ = [
    "IIdentityService",
    "IDocumentStore",
]
