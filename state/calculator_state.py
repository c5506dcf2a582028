"""计算器状态管理 - 状态变化时通知所有监听者"""
import logging
import time

from config.config import STATE_CONFIG

logger = logging.getLogger(__name__)


def default_state(theme=None):
    return {
        'expression': '',
        'current_number': '',
        'result': None,
        'history': [],
        'theme': theme or STATE_CONFIG['default_theme'],
        'is_degree': True,
        'is_scientific': False,
    }


def make_history_item(expression, result, timestamp=None):
    """创建历史记录项，id和timestamp都是毫秒时间戳"""
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    return {
        'id': timestamp,
        'expression': expression,
        'result': result,
        'timestamp': timestamp,
    }


class CalculatorState:

    def __init__(self, initial_state=None, max_history=None):
        initial_state = initial_state or {}
        self.max_history = max_history or STATE_CONFIG['max_history']
        self._listeners = []

        state = default_state()
        state['expression'] = initial_state.get('expression') or ''
        state['current_number'] = initial_state.get('current_number') or ''
        state['result'] = initial_state.get('result') or None
        state['history'] = list(initial_state.get('history') or [])
        state['theme'] = initial_state.get('theme') or state['theme']
        if initial_state.get('is_degree') is not None:
            state['is_degree'] = initial_state['is_degree']
        if initial_state.get('is_scientific') is not None:
            state['is_scientific'] = initial_state['is_scientific']
        self._state = state

    def get_state(self):
        """返回状态的副本，外部修改不会影响内部状态"""
        state = dict(self._state)
        state['history'] = list(self._state['history'])
        return state

    def set_state(self, new_state):
        self._state = dict(new_state)
        self._state['history'] = list(new_state.get('history', []))
        self._state.setdefault('is_degree', True)
        self._state.setdefault('is_scientific', False)
        self._notify_listeners()

    # 模式切换=====================================

    def toggle_scientific_mode(self):
        self._state['is_scientific'] = not self._state['is_scientific']
        self._notify_listeners()

    def is_scientific_mode(self):
        return bool(self._state['is_scientific'])

    def toggle_angle_unit(self):
        self._state['is_degree'] = not self.is_degree_mode()
        self._notify_listeners()

    def is_degree_mode(self):
        # None 视为角度制
        return self._state.get('is_degree') is not False

    # 字段更新=====================================

    def update_expression(self, expression):
        self._state['expression'] = expression
        self._notify_listeners()

    def update_current_number(self, current_number):
        self._state['current_number'] = current_number
        self._notify_listeners()

    def update_result(self, result):
        self._state['result'] = result
        self._notify_listeners()

    def update_theme(self, theme):
        if theme not in STATE_CONFIG['themes']:
            raise ValueError(f"Unknown theme: {theme}")
        self._state['theme'] = theme
        self._notify_listeners()

    # 历史记录=====================================

    def add_history(self, item):
        """
        添加历史记录，最新的在最前面。
        超过 max_history 时丢弃最旧的记录。
        """
        history = [item] + self._state['history']
        if len(history) > self.max_history:
            logger.debug(f"History exceeds {self.max_history} items, dropping {len(history) - self.max_history}")
            history = history[:self.max_history]
        self._state['history'] = history
        self._notify_listeners()

    def remove_history(self, item_id):
        self._state['history'] = [item for item in self._state['history'] if item['id'] != item_id]
        self._notify_listeners()

    def clear_history(self):
        self._state['history'] = []
        self._notify_listeners()

    def reset(self):
        """恢复初始状态，保留主题"""
        self._state = default_state(self._state['theme'])
        self._notify_listeners()

    # 监听者=====================================

    def subscribe(self, listener):
        """
        注册状态监听者

        Returns:
            取消注册的函数
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify_listeners(self):
        current_state = self.get_state()
        for listener in list(self._listeners):
            listener(current_state)
