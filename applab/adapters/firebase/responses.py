"""
Extraction des messages d'erreur des reponses Firebase.

Les deux API renvoient l'erreur dans un champ "error" :
- Identity Toolkit : {"error": {"code": 400, "message": "EMAIL_EXISTS", ...}}
- Realtime Database : {"error": "Permission denied"}

Le message est transmis tel quel, sans traduction ni classification.
"""

import httpx


def error_message(response: httpx.Response) -> str:
    """
    Retourne le message d'erreur porte par une reponse en echec.

    Args:
        response: Reponse HTTP avec un statut >= 400

    Returns:
        Le message du service, ou le statut HTTP si le corps n'est pas exploitable
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error

    text = response.text.strip()
    if text:
        return text
    return f"HTTP {response.status_code} {response.reason_phrase}".strip()
