"""
Adapters - Implementations of ports.

User Directories:
- MemoryUserDirectoryAdapter: In-memory users
- JsonFileUserDirectoryAdapter: Users loaded from a JSON file

Session Stores:
- MemorySessionAdapter: In-process slot
- RedisSessionAdapter: Redis hash
- DynamoDBSessionAdapter: AWS DynamoDB item
"""

# User Directories
from lemonqwest_auth.adapters.memory_directory import MemoryUserDirectoryAdapter
from lemonqwest_auth.adapters.json_directory import JsonFileUserDirectoryAdapter

# Session Stores
from lemonqwest_auth.adapters.memory_session import MemorySessionAdapter
from lemonqwest_auth.adapters.redis_session import RedisSessionAdapter
from lemonqwest_auth.adapters.dynamodb_session import DynamoDBSessionAdapter

__all__ = [
    # User Directories
    "MemoryUserDirectoryAdapter",
    "JsonFileUserDirectoryAdapter",
    # Session Stores
    "MemorySessionAdapter",
    "RedisSessionAdapter",
    "DynamoDBSessionAdapter",
]
