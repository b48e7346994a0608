"""
Parser to extract documented preconditions from Python files.
"""

import ast
from typing import Any, Dict, List, Optional

from .extractor import parse_docstring


class ContractSourceParser:
    """Parse Python source to find the preconditions of every function"""

    def parse_file(self, file_path: str) -> List[Dict[str, Any]]:
        """
        Parse a Python file without importing it.

        Args:
            file_path: Path to Python file

        Returns:
            List of dicts with function info:
            {
                "class": str or None,
                "name": str,
                "lineno": int,
                "preconditions": List[dict]
            }
        """
        with open(file_path, 'r', encoding='utf-8') as f:
            source = f.read()
        return self.parse_source(source, filename=file_path)

    def parse_source(self, source: str, filename: str = "<source>") -> List[Dict[str, Any]]:
        tree = ast.parse(source, filename=filename)
        functions = []
        self._collect(tree, None, functions)
        return functions

    def _collect(self, node: ast.AST, class_name: Optional[str], functions: List[Dict[str, Any]]) -> None:
        for child in ast.iter_child_nodes(node):
            if isinstance(child, ast.ClassDef):
                self._collect(child, child.name, functions)
            elif isinstance(child, (ast.FunctionDef, ast.AsyncFunctionDef)):
                functions.append(self._extract_function(child, class_name))

    def _extract_function(self, node: ast.FunctionDef, class_name: Optional[str]) -> Dict[str, Any]:
        # Raw docstring, annotations are matched line by line
        docstring = ast.get_docstring(node, clean=False)
        return {
            "class": class_name,
            "name": node.name,
            "lineno": node.lineno,
            "preconditions": [d.to_dict() for d in parse_docstring(docstring)]
        }
