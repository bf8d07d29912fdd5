"""Base classes for controllers."""

from esdash.controllers.base.base_controller import BaseFetchClient

__all__ = ["BaseFetchClient"]
