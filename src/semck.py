#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
semck 命令行语义检查器
用法: semck <源文件路径> [输出文件路径] [--ast] [--color]

示例:
    semck prog.txt
    semck prog.txt ./out/result.txt --ast
    python3 semck.py tests/data/example.txt
"""

import sys
import os
from pathlib import Path

# 确保能导入同级目录的模块
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from source_checker import SourceChecker

FLAGS = ('--ast', '--color')


def print_usage():
    print(__doc__)
    print("\n参数说明:")
    print("  source   - 源文件路径")
    print("  output   - 报告输出文件 (可选, 默认只打印到终端)")
    print("  --ast    - 打印带类型注释的 AST")
    print("  --color  - AST 彩色输出")


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    flags = [a for a in args if a.startswith('--')]
    args = [a for a in args if not a.startswith('--')]

    # 参数检查
    unknown = [f for f in flags if f not in FLAGS]
    if unknown or not 1 <= len(args) <= 2:
        print_usage()
        return 2

    source_path = Path(args[0])
    output_path = args[1] if len(args) > 1 else None

    # 验证源文件
    if not source_path.exists():
        print(f"✗ 错误: 源文件不存在: {source_path}")
        return 2

    if not source_path.is_file():
        print(f"✗ 错误: 源路径不是文件: {source_path}")
        return 2

    # 配置
    config = {
        "show_ast": '--ast' in flags,
        "use_colors": '--color' in flags,
    }

    print(f"[SEMCK] 开始检查...")
    print(f"  源文件: {source_path.absolute()}")

    try:
        checker = SourceChecker(config)
        result = checker.check_source(source_path)
    except SyntaxError as e:
        print(f"\n✗ 语法错误!")
        print(f"  错误: {e}")
        if os.environ.get("SEMCK_DEBUG"):
            import traceback
            traceback.print_exc()
        return 2

    if result.ast_dump:
        print()
        print(result.ast_dump)

    if output_path:
        written = checker.write(result, output_path)
        print(f"  报告写入: {written}")

    if not result.ok:
        print(f"\n✗ 检查失败!")
        print(f"  错误: {result.output()}")

        # 调试模式显示堆栈
        if os.environ.get("SEMCK_DEBUG"):
            import traceback
            traceback.print_exception(type(result.error), result.error, result.error.__traceback__)
        return 1

    print(f"\n✓ 检查通过!")
    print(f"  {result.output()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
