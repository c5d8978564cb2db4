from .aisearch import AzureAISearchAdapter

__all__ = ("AzureAISearchAdapter",)
