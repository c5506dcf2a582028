"""状态持久化 - 把计算器状态以JSON保存到键值存储中"""
import json
import logging
import os
from collections.abc import MutableMapping

from config.config import STATE_CONFIG, STORAGE_CONFIG

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('expression', 'current_number', 'result', 'history', 'theme')


class JsonFileStore(MutableMapping):
    """以单个JSON文件为后端的键值存储，每次写入都会落盘"""

    def __init__(self, path):
        self.path = path

    def _read(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self.path} does not contain a JSON object")
        return data

    def _write(self, data):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False)

    def __getitem__(self, key):
        return self._read()[key]

    def _read_for_write(self):
        """写入前读取；文件损坏时视为空，写入会覆盖它"""
        try:
            return self._read()
        except ValueError as e:
            logger.warning(f"Overwriting unreadable store file {self.path}: {e}")
            return {}

    def __setitem__(self, key, value):
        data = self._read_for_write()
        data[key] = value
        self._write(data)

    def __delitem__(self, key):
        data = self._read_for_write()
        del data[key]
        self._write(data)

    def __iter__(self):
        return iter(self._read())

    def __len__(self):
        return len(self._read())


class StorageService:

    def __init__(self, store=None, storage_key=None):
        self.store = store if store is not None else {}
        self.storage_key = storage_key or STORAGE_CONFIG['storage_key']

    def save_state(self, state):
        """保存状态；序列化或写入失败只记录日志"""
        try:
            self.store[self.storage_key] = json.dumps(state, ensure_ascii=False)
        except (TypeError, ValueError, OSError) as e:
            logger.error(f"Failed to save state: {e}")

    def load_state(self):
        """
        读取状态

        Returns:
            状态字典；不存在、无法解析或校验失败时返回None
        """
        try:
            serialized = self.store.get(self.storage_key)
            if not serialized:
                return None
            parsed = json.loads(serialized)
        except (TypeError, ValueError, OSError) as e:
            logger.error(f"Failed to load state: {e}")
            return None

        if not self.is_valid_state(parsed):
            logger.warning("Invalid state data in storage")
            return None

        return parsed

    def clear_state(self):
        try:
            self.store.pop(self.storage_key, None)
        except (ValueError, OSError) as e:
            logger.error(f"Failed to clear state: {e}")

    @staticmethod
    def is_valid_state(data):
        """检查必需字段和字段类型"""
        if not isinstance(data, dict):
            return False

        for field in REQUIRED_FIELDS:
            if field not in data:
                return False

        if not isinstance(data['expression'], str):
            return False
        if not isinstance(data['current_number'], str):
            return False
        if data['result'] is not None and not isinstance(data['result'], str):
            return False
        if not isinstance(data['history'], list):
            return False
        if data['theme'] not in STATE_CONFIG['themes']:
            return False

        return True
