# cadence/cli/commands/__init__.py
# Command modules register themselves on the root app when imported
