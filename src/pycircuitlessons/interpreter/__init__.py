from .replay import replay
from .rules import RULES, Rule, StepContext, match_rule
