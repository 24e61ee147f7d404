"""
Limit Exceptions
================
"""


class LimitTypeNotFound(LookupError):
    """
    Raised when a store is missing one of the ten buckets.

    A complete store is built for every policy, so seeing this means the
    store was constructed incorrectly, not that a request should be retried.
    """

    def __init__(self, bucket):
        self.bucket = bucket
        super().__init__(f"No limit tracked for bucket '{bucket}'")
