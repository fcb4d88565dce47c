# storerota/io - Input loading
from .csv_loader import load_preferences, load_workers, workers_to_dataframe

__all__ = ["load_preferences", "load_workers", "workers_to_dataframe"]
