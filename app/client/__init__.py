from app.client.cache import ClinicCache, as_filters, filter_key
from app.client.directory import DirectoryAPIError, DirectoryClient

__all__ = ["ClinicCache", "as_filters", "filter_key", "DirectoryAPIError", "DirectoryClient"]
