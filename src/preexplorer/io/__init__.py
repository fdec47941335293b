from .data_table import load_data_table

__all__ = ["load_data_table"]
