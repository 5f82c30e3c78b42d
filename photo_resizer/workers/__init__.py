from .variant_worker import VariantWorker

__all__ = ["VariantWorker"]
