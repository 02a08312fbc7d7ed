"""Jaeger custom-resource model, option handling, and service-account and config-map builders."""

__version__ = "0.1.0"