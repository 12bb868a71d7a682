from __future__ import annotations


class ViewerError(Exception):
    pass


class UnsupportedFileType(ViewerError):
    def __init__(self, filename: str):
        super().__init__(f"Unsupported file type: {filename!r} (expected .csv or .jsonl)")
        self.filename = filename


class EmptyUpload(ViewerError):
    pass


class DatasetNotFound(ViewerError):
    def __init__(self, dataset_id: int):
        super().__init__(f"Dataset {dataset_id} not found")
        self.dataset_id = dataset_id


class StoreError(ViewerError):
    pass


class StorageQuotaExceeded(StoreError):
    def __init__(self, needed: int, quota: int):
        super().__init__(f"Storage quota exceeded: {needed} bytes needed, quota is {quota}")
        self.needed = needed
        self.quota = quota
