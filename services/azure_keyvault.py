import os
import logging
from typing import Optional
from azure.keyvault.secrets import SecretClient
from azure.identity import ClientSecretCredential, DefaultAzureCredential
from azure.core.exceptions import AzureError


logger = logging.getLogger(__name__)

VECTOR_DB_URL_SECRET = "VectorDb--Url"
VECTOR_DB_TOKEN_SECRET = "VectorDb--Token"


class AzureKeyVaultService:
    """Service to read vector index credentials from Azure Key Vault"""

    def __init__(self):
        self.client = None
        self.is_initialized = False
        self._initialize_client()

    def _initialize_client(self):
        """Initialize Azure Key Vault client"""
        vault_name = os.getenv("AZ_KEYVAULT_NAME")
        if not vault_name:
            logger.warning("AZ_KEYVAULT_NAME not found in environment variables")
            return

        try:
            key_vault_url = f"https://{vault_name}.vault.azure.net/"

            client_id = os.getenv("AZ_KEYVAULT_CLIENT_ID")
            client_secret = os.getenv("AZ_KEYVAULT_CLIENT_SECRET")
            tenant_id = os.getenv("AZ_KEYVAULT_TENANT_ID")

            if client_id and client_secret and tenant_id:
                logger.info("Using service principal credentials for Key Vault access")
                credential = ClientSecretCredential(
                    tenant_id=tenant_id,
                    client_id=client_id,
                    client_secret=client_secret
                )
            else:
                logger.info("Using default Azure credentials for Key Vault access")
                credential = DefaultAzureCredential()

            self.client = SecretClient(vault_url=key_vault_url, credential=credential)
            self.is_initialized = True
            logger.info("Azure Key Vault client initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize Azure Key Vault client: {e}")
            self.client = None
            self.is_initialized = False

    def get_secret(self, secret_name: str) -> Optional[str]:
        """
        Retrieve a secret from Azure Key Vault

        Args:
            secret_name: Name of the secret to retrieve

        Returns:
            Secret value or None if not found
        """
        if not self.is_initialized:
            logger.error("Azure Key Vault client not initialized")
            return None

        try:
            logger.info(f"Retrieving secret: {secret_name}")
            secret = self.client.get_secret(secret_name)
            return secret.value
        except AzureError as e:
            logger.warning(f"Azure error retrieving secret {secret_name}: {e}")
            return None

    def get_vector_db_config(self) -> dict:
        """
        Get vector index configuration from Key Vault

        Returns:
            Dictionary containing the index URL and token
        """
        config = {
            "url": self.get_secret(VECTOR_DB_URL_SECRET),
            "token": self.get_secret(VECTOR_DB_TOKEN_SECRET)
        }

        if not config["url"]:
            logger.warning("Vector index URL not found in Key Vault")
        if not config["token"]:
            logger.warning("Vector index token not found in Key Vault")

        return config


class LazyAzureKeyVaultService:
    """Lazy-loading proxy for Azure Key Vault Service"""
    def __init__(self):
        self._service = None

    def _get_service(self):
        if self._service is None:
            self._service = AzureKeyVaultService()
        return self._service

    @property
    def is_configured(self):
        return bool(os.getenv("AZ_KEYVAULT_NAME"))

    @property
    def is_initialized(self):
        if self._service is None:
            return False
        return self._service.is_initialized

    def get_secret(self, secret_name: str):
        return self._get_service().get_secret(secret_name)

    def get_vector_db_config(self):
        return self._get_service().get_vector_db_config()

# Global instance
azure_kv_service = LazyAzureKeyVaultService()
