from __future__ import annotations

from dataclasses import dataclass

import quickjs

from j2j.core.runtime import Evaluation, EvaluationFailed, EvaluationOutcome
from .registry import register_evaluator

_MEMORY_LIMIT_BYTES = 32 * 1024 * 1024
_MAX_STACK_BYTES = 1024 * 1024
_RESULT_NAME = "__j2j_result__"


def _wrap(source: str) -> str:
    # newline before the paren so a trailing // comment cannot swallow it
    return f"var {_RESULT_NAME} = ({source}\n);"


def _is_interrupt(exc: quickjs.JSException) -> bool:
    return "interrupted" in str(exc)


@register_evaluator("quickjs")
@dataclass(slots=True)
class QuickJSEvaluator:
    """Evaluates source text in a throwaway QuickJS context.

    The context has no filesystem, network or process bindings, and only
    the value's ``typeof`` name and ``JSON.stringify`` text leave it. This
    keeps the host clean; it is not a defence against hostile input.
    """

    timeout: float = 1.0
    memory_limit: int = _MEMORY_LIMIT_BYTES
    max_stack_size: int = _MAX_STACK_BYTES

    def _new_context(self) -> quickjs.Context:
        context = quickjs.Context()
        context.set_time_limit(self.timeout)
        context.set_memory_limit(self.memory_limit)
        context.set_max_stack_size(self.max_stack_size)
        return context

    def evaluate(self, source: str) -> EvaluationOutcome:
        context = self._new_context()
        try:
            context.eval(_wrap(source))
            type_name = context.eval(f"typeof {_RESULT_NAME}")
        except quickjs.JSException as exc:
            if _is_interrupt(exc):
                return EvaluationFailed("timeout")
            return EvaluationFailed(str(exc))

        try:
            payload = context.eval(f"JSON.stringify({_RESULT_NAME})")
        except quickjs.JSException as exc:
            if _is_interrupt(exc):
                return EvaluationFailed("timeout")
            # cyclic structures, BigInt members, throwing toJSON()
            return Evaluation(type_name=type_name, payload=None, problem=str(exc))

        return Evaluation(type_name=type_name, payload=payload)
