from ._network_manager import NetworkManager

__all__ = ["NetworkManager"]
