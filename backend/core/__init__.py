"""Core backend infrastructure for the netball stats service.

Configuration, logging, database and dependency helpers used by the FastAPI
application entrypoint and the command line tools.
"""
