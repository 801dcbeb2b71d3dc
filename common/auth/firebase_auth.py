"""
Firebase Admin SDK authentication provider.

Uses Firebase Authentication for token verification and user lookup, and the
Identity Toolkit REST API for exchanging a Google credential for a Firebase
session. Requires firebase-admin and a service account credentials file.

Example:
    auth = FirebaseAuth(credentials_path="path/to/serviceAccount.json")

    # Exchange a Google ID token obtained by the client
    session = await auth.sign_in_with_idp(google_id_token)
    print(session["uid"], session["idToken"])

    # Verify ID token from client
    claims = await auth.verify_token(id_token)
    print(claims["uid"])  # Firebase user ID
"""

import logging
import os
from typing import Dict, Any, Optional
from urllib.parse import urlencode

import httpx
from dotenv import load_dotenv

from common.auth.base import (
    AuthProvider,
    AuthError,
    SignInCancelledError,
    TokenExpiredError,
    UnauthorizedDomainError,
)

load_dotenv()

logger = logging.getLogger(__name__)

# Identity Toolkit error messages that mean the calling domain is not allowed
UNAUTHORIZED_DOMAIN_ERRORS = {"UNAUTHORIZED_DOMAIN", "INVALID_REQUEST_URI"}

# Identity Toolkit error messages that mean the user abandoned the IdP flow
CANCELLED_IDP_ERRORS = {"USER_CANCELLED"}


def _get_firebase_credentials_from_env() -> Optional[Dict[str, Any]]:
    """
    Check if Firebase credentials are present in environment variables.
    Returns credentials dict if all required fields are present, None otherwise.
    """
    required_fields = [
        "PROJECT_ID",
        "PRIVATE_KEY",
        "CLIENT_EMAIL",
    ]

    for field in required_fields:
        if not os.environ.get(field):
            return None

    def _env(name: str, default: str = "") -> str:
        return os.environ.get(name, default).strip('"').strip(",")

    return {
        "type": _env("TYPE", "service_account"),
        "project_id": _env("PROJECT_ID"),
        "private_key_id": _env("PRIVATE_KEY_ID"),
        "private_key": _env("PRIVATE_KEY").replace("\\n", "\n"),
        "client_email": _env("CLIENT_EMAIL"),
        "client_id": _env("CLIENT_ID"),
        "auth_uri": _env("AUTH_URI", "https://accounts.google.com/o/oauth2/auth"),
        "token_uri": _env("TOKEN_URI", "https://oauth2.googleapis.com/token"),
        "auth_provider_x509_cert_url": _env(
            "AUTH_PROVIDER_X509_CERT_URL", "https://www.googleapis.com/oauth2/v1/certs"
        ),
        "client_x509_cert_url": _env("CLIENT_X509_CERT_URL"),
        "universe_domain": _env("UNIVERSE_DOMAIN", "googleapis.com"),
    }


class FirebaseAuth(AuthProvider):
    """
    Firebase Admin SDK authentication provider.

    Handles user authentication through Firebase, which provides:
    - Google (IdP) sign-in
    - ID token verification
    - Refresh token revocation
    """

    # Firebase REST API base URL
    FIREBASE_AUTH_URL = "https://identitytoolkit.googleapis.com/v1/accounts"

    def __init__(
        self,
        credentials_path: Optional[str] = None,
        credentials_dict: Optional[Dict[str, Any]] = None,
        project_id: Optional[str] = None,
        api_key: Optional[str] = None,
    ):
        """
        Initialize Firebase auth provider.

        Args:
            credentials_path: Path to service account JSON file
            credentials_dict: Service account credentials as dict (alternative to path)
            project_id: Firebase project ID (optional, can be inferred from credentials)
            api_key: Firebase Web API Key (for REST API authentication)
        """
        try:
            import firebase_admin
            from firebase_admin import credentials, auth
        except ImportError:
            raise ImportError(
                "firebase-admin package is required for Firebase authentication. "
                "Install with: pip install firebase-admin"
            )

        self._api_key = api_key or os.environ.get("FIREBASE_API_KEY")

        # Initialize Firebase app if not already done
        if not firebase_admin._apps:
            if credentials_path:
                cred = credentials.Certificate(credentials_path)
            elif credentials_dict:
                cred = credentials.Certificate(credentials_dict)
            else:
                env_credentials = _get_firebase_credentials_from_env()
                if env_credentials:
                    cred = credentials.Certificate(env_credentials)
                else:
                    # Use default credentials (for GCP environments)
                    cred = credentials.ApplicationDefault()

            options = {}
            if project_id:
                options["projectId"] = project_id

            firebase_admin.initialize_app(cred, options)

        self._auth = auth

    async def sign_in_with_idp(
        self,
        id_token: str,
        request_uri: str = "http://localhost",
        provider_id: str = "google.com",
    ) -> Dict[str, Any]:
        """
        Exchange an identity provider credential for a Firebase session.

        Args:
            id_token: The ID token returned by the provider's sign-in flow
            request_uri: URI the provider redirected back to; its domain must
                be in the project's authorized domains
            provider_id: Identity provider (default: google.com)

        Returns:
            Dict containing uid, email, displayName, photoUrl, idToken,
            refreshToken and expiresIn

        Raises:
            UnauthorizedDomainError: If the request URI's domain is not authorized
            SignInCancelledError: If the provider reports the user cancelled
            AuthError: For any other rejection or a missing API key
        """
        if not self._api_key:
            raise AuthError(
                "Firebase API key is required for provider sign-in. "
                "Set FIREBASE_API_KEY environment variable."
            )

        url = f"{self.FIREBASE_AUTH_URL}:signInWithIdp?key={self._api_key}"
        payload = {
            "postBody": urlencode({"id_token": id_token, "providerId": provider_id}),
            "requestUri": request_uri,
            "returnIdpCredential": True,
            "returnSecureToken": True,
        }

        async with httpx.AsyncClient() as client:
            response = await client.post(url, json=payload)

        if response.status_code != 200:
            error_message = response.json().get("error", {}).get("message", "Unknown error")
            # Messages can carry a detail suffix, e.g. "INVALID_IDP_RESPONSE : ..."
            error_code = error_message.split(":")[0].strip()
            logger.warning(f"Firebase signInWithIdp rejected: {error_message}")

            if error_code in UNAUTHORIZED_DOMAIN_ERRORS:
                raise UnauthorizedDomainError(
                    "This app's domain is not authorized. Please add it to your "
                    "Firebase project's authorized domains list in the "
                    "Authentication settings."
                )
            if error_code in CANCELLED_IDP_ERRORS:
                raise SignInCancelledError("Sign-in was cancelled by the user")
            if error_code == "USER_DISABLED":
                raise AuthError("Account has been disabled")
            raise AuthError(f"Authentication failed: {error_message}")

        data = response.json()

        return {
            "uid": data.get("localId"),
            "email": data.get("email"),
            "displayName": data.get("displayName"),
            "photoUrl": data.get("photoUrl"),
            "idToken": data.get("idToken"),
            "refreshToken": data.get("refreshToken"),
            "expiresIn": data.get("expiresIn"),
        }

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify a Firebase ID token."""
        try:
            decoded = self._auth.verify_id_token(token, check_revoked=True)
            # Add 'sub' field for compatibility with other providers
            decoded["sub"] = decoded.get("uid")
            return decoded
        except self._auth.RevokedIdTokenError:
            raise TokenExpiredError("Token has been revoked")
        except self._auth.ExpiredIdTokenError:
            raise TokenExpiredError("Token has expired")
        except self._auth.InvalidIdTokenError as e:
            raise AuthError(f"Invalid token: {e}")
        except Exception as e:
            raise AuthError(f"Token verification failed: {e}")

    async def revoke_token(self, token: str) -> None:
        """Revoke all refresh tokens for a user."""
        try:
            decoded = self._auth.verify_id_token(token)
            uid = decoded.get("uid")
            if uid:
                self._auth.revoke_refresh_tokens(uid)
        except Exception as e:
            raise AuthError(f"Failed to revoke token: {e}")

    async def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get Firebase user by UID."""
        try:
            user = self._auth.get_user(user_id)
            return {
                "id": user.uid,
                "uid": user.uid,
                "email": user.email,
                "display_name": user.display_name,
                "photo_url": user.photo_url,
                "disabled": user.disabled,
            }
        except self._auth.UserNotFoundError:
            return None
        except Exception as e:
            raise AuthError(f"Failed to get user: {e}")
