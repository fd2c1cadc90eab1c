__version__ = "0.9.2"
__description__ = "jaclient : JSON:API client with composable middleware and compound document deserialization"
