# stubkit/converter/plugins/__init__.py
"""
Built-in registered converter plugins.

Every module in this package is scanned by the default ConverterRegistry.
Third-party converters register through the ``stubkit.contract_converters``
entry point group instead.
"""
