from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAPIConfig(BaseSettings):
    """OpenAPI configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="OPENAPI_")

    title: str = "Bot Hosting API"
    """The title of the OpenAPI documentation"""
    version: str = "v1"
    """The version of the OpenAPI documentation"""
    description: str = "Upload user scripts and start, stop or inspect them as child processes."
    """A brief description of the API"""
