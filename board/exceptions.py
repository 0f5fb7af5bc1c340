class PostNotFoundError(LookupError):
    """Raised when a lookup by post id matches no stored post."""

    message = "no post found for the given id"

    def __init__(self, post_id: int) -> None:
        super().__init__(self.message)
        self.post_id = post_id
