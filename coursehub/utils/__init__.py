from .ids import is_valid_id, normalize_id

__all__ = ["is_valid_id", "normalize_id"]
