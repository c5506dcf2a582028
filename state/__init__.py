"""状态模块 - 计算器状态和持久化"""
from .calculator_state import CalculatorState, default_state, make_history_item
from .storage import StorageService, JsonFileStore

__all__ = [
    'CalculatorState', 'default_state', 'make_history_item',
    'StorageService', 'JsonFileStore'
]
