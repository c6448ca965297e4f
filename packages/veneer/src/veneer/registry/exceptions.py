# veneer/registry/exceptions.py
"""Registry exceptions"""
from veneer.exceptions import VeneerError


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(VeneerError): ...


class RegistryCollisionError(RegistryError): ...


class RegistryLookupError(RegistryError, LookupError): ...


class RegistryFrozenError(RuntimeError, RegistryError): ...
