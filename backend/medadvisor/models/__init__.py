from medadvisor.models.medicine import Medicine

__all__ = ["Medicine"]
