class UniqueViolationError(Exception):
    """Raised by the in-memory backend when uniqueness enforcement is on."""

    def __init__(self, entity: str, fields: tuple, value):
        self.entity = entity
        self.fields = fields
        self.value = value
        super().__init__(f"{entity} with {', '.join(fields)}={value!r} already exists")
