from .base import GitPlatform
from .azure_devops import AzureDevOpsClient

__all__ = ["GitPlatform", "AzureDevOpsClient"]
