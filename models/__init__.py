"""
Persistence package.

`storage` is the process-wide DBStorage instance; the application factory binds
it to a database URL via storage.reload().
"""
from models.db_storage import DBStorage

storage = DBStorage()
