# data_sources/__init__.py
