"""utils/history.py - 计算历史的表格视图和导出"""
import logging

import pandas as pd

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ['id', 'expression', 'result', 'timestamp']


def history_to_frame(history):
    """
    把历史记录列表转换为DataFrame

    Args:
        history: HistoryItem字典列表（最新的在前）
    Returns:
        DataFrame，额外包含由毫秒时间戳转换的 'time' 列
    """
    df = pd.DataFrame(list(history), columns=HISTORY_COLUMNS)
    df['time'] = pd.to_datetime(df['timestamp'].astype('int64'), unit='ms')
    return df


def export_history(history, path):
    """把历史记录导出为CSV，返回导出的行数"""
    df = history_to_frame(history)
    df.to_csv(path, index=False)
    logger.info(f"Exported {len(df)} history items to {path}")
    return len(df)
