"""
Exceptions du domaine.

Hiérarchie des erreurs remontées par les adaptateurs et les services :
- ValidationError : saisie invalide, détectée avant tout appel réseau
- IdentityServiceError / DocumentStoreError : erreurs des services externes,
  message transmis tel quel
- IdentityCreationFailed / ProfileWriteFailed / AuthenticationFailed :
  issues des flux d'inscription et de connexion
- NotAuthenticatedError : aucune identité courante

L'absence de document de profil n'est pas une erreur (vue de repli).
"""


class ApplabError(Exception):
    """
    Exception de base de l'application.

    Attributes:
        message: Texte prêt à être affiché à l'utilisateur
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ApplabError):
    """
    Saisie invalide détectée localement, avant toute requête.

    Attributes:
        field: Nom du champ en cause ("name", "email" ou "password")
        message: Message d'erreur à afficher sous le champ
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class IdentityServiceError(ApplabError):
    """Erreur renvoyée par le service d'identité (texte du service, non classifié)."""


class DocumentStoreError(ApplabError):
    """Erreur renvoyée par le stockage de documents (texte du service)."""


class AuthFlowError(ApplabError):
    """Base des échecs des flux d'inscription et de connexion."""


class IdentityCreationFailed(AuthFlowError):
    """La création de l'identifiant a échoué ; aucun profil n'a été écrit."""


class ProfileWriteFailed(AuthFlowError):
    """
    L'identifiant a été créé mais l'écriture du profil a échoué.

    L'identifiant reste valide (orphelin) : aucune compensation n'est tentée.

    Attributes:
        uid: Identifiant de l'identité créée sans profil
    """

    def __init__(self, message: str, uid: str) -> None:
        self.uid = uid
        super().__init__(message)


class AuthenticationFailed(AuthFlowError):
    """La vérification de l'identifiant a échoué (message du service tel quel)."""


class NotAuthenticatedError(ApplabError):
    """Aucune identité courante : l'utilisateur doit se connecter."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)
