"""
Configuration

- settings: environment-driven application settings
- database: in-process record tables shared by the models
"""
