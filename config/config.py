"""配置文件"""
import os

# 计算引擎参数
ENGINE_CONFIG = {
    "snap_epsilon": 1e-10,  # cos/tan 结果绝对值小于该值时归零
    "max_factorial": 170,  # 超过170的阶乘会溢出float
}

# 状态参数
STATE_CONFIG = {
    "max_history": 50,  # 最多保留50条历史
    "themes": ("light", "dark", "system"),
    "default_theme": "system",
}

# 存储参数
STORAGE_CONFIG = {
    "storage_key": "calc_app_v1",
    "default_state_path": os.path.join(os.path.expanduser("~"), ".calc_app_state.json"),
}

# 格式化参数
FORMAT_CONFIG = {
    "max_decimals": 10,  # 小数点后最多10位
    "small_threshold": 1e-6,  # 小于该值使用科学计数法
    "large_threshold": 1e15,  # 大于该值使用科学计数法
    "exponent_digits": 6,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert 0 < ENGINE_CONFIG["snap_epsilon"] < 1e-6, "snap_epsilon 应该是极小的正数"
    assert ENGINE_CONFIG["max_factorial"] == 170, "170! 是float能表示的最大阶乘"
    assert STATE_CONFIG["max_history"] > 0, "历史条数必须为正"
    assert STATE_CONFIG["default_theme"] in STATE_CONFIG["themes"], "默认主题必须在主题列表中"
    assert FORMAT_CONFIG["small_threshold"] < 1 < FORMAT_CONFIG["large_threshold"], "科学计数法阈值不合理"
    return True
