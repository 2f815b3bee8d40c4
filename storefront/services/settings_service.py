# storefront/services/settings_service.py
import json
from typing import Dict, Any, Optional
from decimal import Decimal

class SettingsService:
    """Key/value shop settings such as the order id prefix"""

    def __init__(self, db):
        self.db = db

    async def get_all_settings(self) -> Dict[str, Any]:
        """All settings, converted to their stored type"""
        async with self.db.pool.acquire() as conn:
            settings = await conn.fetch("""
                SELECT key, value, type
                FROM settings
            """)

            return {s['key']: self._convert_value(s['value'], s['type']) for s in settings}

    async def get_setting(self, key: str) -> Optional[Any]:
        """One setting or None"""
        async with self.db.pool.acquire() as conn:
            setting = await conn.fetchrow("""
                SELECT value, type
                FROM settings
                WHERE key = $1
            """, key)

            if setting:
                return self._convert_value(setting['value'], setting['type'])
            return None

    async def update_setting(self, key: str, value: Any) -> None:
        """Insert or overwrite a setting"""
        value_type = self._get_value_type(value)
        value_str = json.dumps(value) if value_type == 'json' else str(value)

        async with self.db.pool.acquire() as conn:
            await conn.execute("""
                INSERT INTO settings (key, value, type)
                VALUES ($1, $2, $3)
                ON CONFLICT (key)
                DO UPDATE SET value = $2, type = $3
            """, key, value_str, value_type)

    @staticmethod
    def _get_value_type(value: Any) -> str:
        if isinstance(value, bool):
            return 'boolean'
        elif isinstance(value, int):
            return 'integer'
        elif isinstance(value, float) or isinstance(value, Decimal):
            return 'decimal'
        elif isinstance(value, (dict, list)):
            return 'json'
        else:
            return 'string'

    @staticmethod
    def _convert_value(value: str, type_: str) -> Any:
        if type_ == 'boolean':
            return value.lower() == 'true'
        elif type_ == 'integer':
            return int(value)
        elif type_ == 'decimal':
            return Decimal(value)
        elif type_ == 'json':
            return json.loads(value)
        else:
            return value
