"""Station Operations package.

Feature modules (stations, employees, inventory, dashboard, messages) each
carry a thin Flask controller over service and repository layers.
"""
