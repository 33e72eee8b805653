from .IndentRule import IndentAction, IndentRule, IndentRuleConfig, IndentRuleSet
from .OutputStrategy import OutputStrategyBase, output_strategy
from .OverwriteStrategy import OverwriteStrategyBase, overwrite_strategy
from .CodeFile import CodeFileBase, CSharpCodeFile, IndentableCodeFile, SQLCodeFile, TextCodeFile, code_file
