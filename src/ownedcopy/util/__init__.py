from .mime import FOLDER_MIME, is_folder

__all__ = ["FOLDER_MIME", "is_folder"]
