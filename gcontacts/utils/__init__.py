"""
Utility modules for the contacts client
"""
from .config_loader import ContactsAPIConfig, load_contacts_config, load_client_options_from_env

__all__ = [
    'ContactsAPIConfig',
    'load_contacts_config',
    'load_client_options_from_env',
]
