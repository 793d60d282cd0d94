"""
Adaptateurs Firebase.

Ce module fournit les implementations concretes des ports:
- FirebaseIdentityClient: Firebase Authentication (Identity Toolkit REST)
- FirebaseRealtimeDatabase: Realtime Database (API REST)

Infrastructure partagee:
- SessionStore: session courante persistee avec diskcache
- Session: identite et jetons de la session ouverte
"""

from applab.adapters.firebase.database_client import FirebaseRealtimeDatabase
from applab.adapters.firebase.identity_client import FirebaseIdentityClient
from applab.adapters.firebase.session_store import Session, SessionStore

__all__ = [
    "FirebaseIdentityClient",
    "FirebaseRealtimeDatabase",
    "Session",
    "SessionStore",
]
