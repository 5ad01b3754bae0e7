"""主程序入口 - 单次计算、批量计算和交互模式"""
import argparse
import logging

from config.config import *
from core.calculator import calculate
from data.expression_loader import load_expressions, evaluate_expressions
from history.store import HistoryStore
from session.calculator_session import CalculatorSession
from utils.formatting import format_result

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_interactive(session, input_func=input, output_func=print):
    """
    交互模式：每行一个表达式，空行重复上一次计算
    命令: :deg / :rad 切换角度模式, :ac 清空, :history 查看历史, :quit 退出
    """
    output_func(f"Angle mode: {session.angle_mode}. Type :quit to exit.")
    while True:
        try:
            line = input_func(f"[{session.angle_mode}] > ").strip()
        except EOFError:
            break

        if line in (':quit', ':q'):
            break
        if line in (':deg', ':rad'):
            session.is_degree_mode = line == ':deg'
            output_func(f"Angle mode: {session.angle_mode}")
            continue
        if line == ':ac':
            session.clear()
            continue
        if line == ':history':
            for entry in session.history.lines(session.precision):
                output_func(entry)
            continue

        result = session.press_equal(line if line else None)
        output_func(session.display(result))


def main(args):
    validate_config()
    is_degree_mode = not args.radians
    precision = CALCULATOR_CONFIG['display_precision']
    right_associative_power = args.right_associative_power or CALCULATOR_CONFIG['right_associative_power']
    if right_associative_power:
        logger.info("Using right-associative exponentiation")

    # 单次计算
    for expression in args.expr or []:
        result = calculate(expression, is_degree_mode, right_associative_power)
        if result.ok:
            print(f"{expression} = {format_result(result.value, precision)}")
        else:
            print(f"{expression}: {result.error}")

    # 批量计算
    if args.input_path:
        expressions = load_expressions(args.input_path, BATCH_CONFIG['expression_column'])
        results = evaluate_expressions(expressions, is_degree_mode, right_associative_power)
        output_path = args.output_path or BATCH_CONFIG['output_path']
        logger.info(f"Saving {len(results)} results to {output_path}")
        results.to_csv(output_path, index=False)

    # 交互模式
    if args.interactive:
        history_path = args.history_path or HISTORY_CONFIG['history_path']
        history = HistoryStore.load(history_path, HISTORY_CONFIG['max_entries'])
        session = CalculatorSession(is_degree_mode=is_degree_mode, history=history,
                                    right_associative_power=right_associative_power)
        run_interactive(session)
        if args.save_history:
            history.save(history_path)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Scientific calculator")

    parser.add_argument(
        "--expr",
        type=str,
        action="append",
        help="Expression to evaluate (may be given several times)"
    )
    parser.add_argument(
        "--radians",
        action="store_true",
        help="Evaluate trigonometric functions in radians instead of degrees"
    )
    parser.add_argument(
        "--right_associative_power",
        action="store_true",
        help="Evaluate 2^3^2 as 2^(3^2) instead of (2^3)^2"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="CSV (with an 'expression' column) or text file with one expression per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the batch results (default: BATCH_CONFIG output_path)"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start an interactive session"
    )
    parser.add_argument(
        "--history_path",
        type=str,
        default=None,
        help="CSV file the interactive history is loaded from (default: HISTORY_CONFIG history_path)"
    )
    parser.add_argument(
        "--save_history",
        action="store_true",
        help="Save the interactive history when the session ends"
    )
    args = parser.parse_args()

    if not (args.expr or args.input_path or args.interactive):
        parser.error("nothing to do: pass --expr, --input_path or --interactive")

    main(args)
