"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

from config.config import STORAGE_CONFIG, validate_config
from core import CalculatorEngine, CalculatorError
from state import CalculatorState, JsonFileStore, StorageService, make_history_item
from utils import export_history, format_result, history_to_frame, number_to_string

logger = logging.getLogger(__name__)


def _load_state(storage):
    saved = storage.load_state()
    if saved is None:
        logger.debug("No saved state, starting fresh")
    return CalculatorState(saved)


def run_expression(engine, state, expression):
    """计算表达式并记录历史，返回格式化后的结果"""
    result = number_to_string(engine.calculate(expression))
    state.update_expression(expression)
    state.update_result(result)
    state.add_history(make_history_item(expression, result))
    return format_result(result)


def run_function(engine, state, name, value, use_degrees):
    result = number_to_string(engine.calculate_scientific_function(name, value, use_degrees))
    state.update_current_number(result)
    unit = 'deg' if use_degrees else 'rad'
    state.add_history(make_history_item(f"{name}({number_to_string(value)} {unit})", result))
    return format_result(result)


def run_percent(engine, state, value, base):
    result = engine.calculate_percent(value, base)
    state.update_current_number(result)
    return format_result(result)


def main(args):
    validate_config()

    engine = CalculatorEngine()
    storage = StorageService(JsonFileStore(args.state_path))
    state = _load_state(storage)
    state.subscribe(storage.save_state)

    try:
        if args.clear_history:
            state.clear_history()
            logger.info("History cleared")

        if args.expression:
            print(run_expression(engine, state, args.expression))
        elif args.function:
            print(run_function(engine, state, args.function, args.value, not args.radians))
        elif args.percent is not None:
            print(run_percent(engine, state, args.percent, args.base))

    except CalculatorError as e:
        logger.debug(f"Calculation failed: {type(e).__name__}: {e}")
        print(f"Error: {e}")
        return 1

    history = state.get_state()['history']
    if args.history:
        if history:
            print(history_to_frame(history)[['time', 'expression', 'result']].to_string(index=False))
        else:
            print("(history is empty)")

    if args.export_history:
        export_history(history, args.export_history)

    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Scientific Calculator")

    parser.add_argument(
        "expression",
        nargs="?",
        help="Infix expression to evaluate, e.g. '(2 + 3) * 4'"
    )
    parser.add_argument(
        "--function",
        type=str,
        help="Scientific function to apply (sin, cos, tan, asin, acos, atan, log, ln, "
             "exp, sqrt, cbrt, pow2, inv, abs, fact)"
    )
    parser.add_argument(
        "--value",
        type=float,
        help="Operand for --function"
    )
    parser.add_argument(
        "--radians",
        action="store_true",
        help="Interpret angles in radians instead of degrees"
    )
    parser.add_argument(
        "--percent",
        type=str,
        help="Percentage value"
    )
    parser.add_argument(
        "--base",
        type=str,
        default=None,
        help="Base value for --percent (e.g. --percent 20 --base 100 -> 20)"
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Print the calculation history"
    )
    parser.add_argument(
        "--export_history",
        "--export-history",
        type=str,
        default=None,
        help="Export the calculation history to a CSV file"
    )
    parser.add_argument(
        "--clear_history",
        "--clear-history",
        action="store_true",
        help="Clear the calculation history"
    )
    parser.add_argument(
        "--state_path",
        "--state-path",
        type=str,
        default=STORAGE_CONFIG["default_state_path"],
        help="Path to the JSON state file"
    )
    parser.add_argument(
        "--log_level",
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.function and args.value is None:
        parser.error("--function requires --value")

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
