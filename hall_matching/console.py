"""
Консольный запуск: читает граф из файла (или встроенный пример), строит
паросочетание, насыщающее левую долю, печатая пошаговые пояснения, и по
окончании пишет ВСЕ шаги в файл (по умолчанию hall_steps.log).

Код возврата: 0 — левая доля насыщена, 2 — условие Холла нарушено,
1 — ошибка входных данных или превышен бюджет шагов.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from hall_matching.driver import MatchingDriver
from hall_matching.errors import GraphInputError, StepBudgetExceeded
from hall_matching.graph_input import load_graph, load_graph_text
from hall_matching.samples import SAMPLES
from hall_matching.step_log import StepLog

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_VIOLATION = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Паросочетание, насыщающее левую долю двудольного графа, "
                    "или дефицитное множество (условие Холла): пошаговые пояснения + лог в файл."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("input", nargs="?", help="путь к входному файлу с графом")
    source.add_argument("--sample", choices=sorted(SAMPLES), help="встроенный пример вместо файла")
    parser.add_argument(
        "-o",
        "--output",
        default="hall_steps.log",
        help="файл для записи всех шагов (по умолчанию hall_steps.log)",
    )
    parser.add_argument(
        "--maximum",
        action="store_true",
        help="не останавливаться на нарушении Холла, а достроить максимальное паросочетание",
    )
    parser.add_argument("--max-steps", type=int, default=None, help="предел числа просмотренных рёбер")
    parser.add_argument("--plot", default=None, help="сохранить рисунок результата (PNG)")
    parser.add_argument("-q", "--quiet", action="store_true", help="не дублировать шаги в stdout")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = StepLog(echo=not args.quiet)

    if args.max_steps is not None and args.max_steps < 0:
        logger.log(f"ОШИБКА: --max-steps должен быть неотрицательным, получено {args.max_steps}")
        logger.dump_to_file(args.output)
        return EXIT_ERROR

    try:
        if args.sample is not None:
            graph = load_graph_text(SAMPLES[args.sample], logger, source_name=f"пример «{args.sample}»")
        else:
            graph = load_graph(args.input, logger)
        driver = MatchingDriver(
            graph, log=logger, max_steps=args.max_steps, stop_on_violation=not args.maximum
        )
        result = driver.run()
    except (OSError, GraphInputError, StepBudgetExceeded) as e:
        logger.log(f"\nОШИБКА: {e}")
        logger.dump_to_file(args.output)
        return EXIT_ERROR

    logger.log("ИТОГ:")
    if result.violation is not None:
        logger.log("  " + result.violation.describe(graph))
    logger.log("  Пары (left - right):")
    for left, right in result.matching.pairs(graph):
        logger.log(f"    {left} - {right}")
    if result.unsaturated:
        logger.log(f"  Ненасыщенные левые вершины: {result.unsaturated}")

    if args.plot:
        from hall_matching.render import save_drawing

        save_drawing(args.plot, graph, result.matching, violation=result.violation)
        logger.log(f"Рисунок сохранён в файл: {args.plot}")

    logger.dump_to_file(args.output)
    logger.log(f"\nПолный лог шагов сохранён в файл: {args.output}")
    return EXIT_OK if result.saturating else EXIT_VIOLATION


if __name__ == "__main__":
    sys.exit(main())
