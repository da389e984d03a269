"""Loaders and exporters around the core: schedule text, orders JSON, Excel."""
