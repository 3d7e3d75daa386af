import os
import uuid

from azure.storage.blob import BlobServiceClient, ContentSettings
from dotenv import load_dotenv

load_dotenv()

account = os.getenv("AZURE_STORAGE_ACCOUNT")
key = os.getenv("AZURE_STORAGE_KEY")
SPACES_CONTAINER = os.getenv("AZURE_SPACES_CONTAINER", "space-images")

_blob_service = None


def get_blob_service() -> BlobServiceClient:
     global _blob_service
     if _blob_service is None:
          if not account or not key:
               raise RuntimeError("AZURE_STORAGE_ACCOUNT and AZURE_STORAGE_KEY must be set")
          _blob_service = BlobServiceClient.from_connection_string(
               f"DefaultEndpointsProtocol=https;"
               f"AccountName={account};"
               f"AccountKey={key};"
               f"EndpointSuffix=core.windows.net"
          )
     return _blob_service


def upload_to_blob(file, container: str, owner_id: str | int):
     ext = os.path.splitext(file.filename or "")[1]
     filename = f"{owner_id}/{uuid.uuid4()}{ext}"
     blob_client = get_blob_service().get_blob_client(container=container, blob=filename)
     blob_client.upload_blob(
          file.file,
          overwrite=True,
          content_settings=ContentSettings(content_type=file.content_type),
     )
     return f"https://{account}.blob.core.windows.net/{container}/{filename}"


def delete_from_blob(blob_url: str):
     """
     Deletes a file from Azure Blob Storage using its full URL
     """
     container, blob_name = blob_url.split(".blob.core.windows.net/", 1)[1].split("/", 1)
     blob_client = get_blob_service().get_blob_client(
          container=container,
          blob=blob_name
     )
     blob_client.delete_blob()
