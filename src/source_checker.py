#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, Union

from analyzer import SemanticAnalyzer
from errors import SemanticError
from metrics import Metrics
from parser import parse
from visitors import print_ast


@dataclass
class CheckResult:
    """一次分析的结果：metrics 与 error 恰好有一个非空"""
    metrics: Optional[Metrics] = None
    error: Optional[SemanticError] = None
    ast_dump: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def output(self) -> str:
        """成功时为计数报告，失败时为错误信息"""
        if self.error is not None:
            return self.error.message
        return self.metrics.report()


class SourceChecker:
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

        # 基础配置
        self.show_ast = self.config.get("show_ast", False)
        self.use_colors = self.config.get("use_colors", False)
        self.encoding = self.config.get("encoding", "utf-8")

        self.analyzer = SemanticAnalyzer()

    def check_text(self, text: str) -> CheckResult:
        """解析并分析源码文本；语法错误直接抛出 SyntaxError"""
        program = parse(text)
        try:
            metrics = self.analyzer.analyze(program)
            result = CheckResult(metrics=metrics)
        except SemanticError as e:
            result = CheckResult(error=e)

        if self.show_ast:
            result.ast_dump = print_ast(program, use_colors=self.use_colors)
        return result

    def check_source(self, source_file: Union[str, Path]) -> CheckResult:
        source_path = Path(source_file)
        text = source_path.read_text(encoding=self.encoding)
        return self.check_text(text)

    def write(self, result: CheckResult, output_path: Union[str, Path]) -> Path:
        """把报告或错误信息写入文件"""
        path = Path(output_path).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.output(), encoding=self.encoding)
        return path
