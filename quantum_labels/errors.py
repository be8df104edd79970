"""Errors raised while loading label data from CSV."""


class LabelDataError(Exception):
    """Base class for a rejected CSV load. ``message`` is shown to the user."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class CsvFormatError(LabelDataError):
    pass


class SchemaError(LabelDataError):
    def __init__(self, header):
        super().__init__(f"Cabeçalho faltando: {header}")
        self.header = header


class InvalidQuantityError(LabelDataError, ValueError):
    def __init__(self, record_id):
        super().__init__(f"Quantidade inválida para o item com ID: {record_id}")
        self.record_id = record_id
