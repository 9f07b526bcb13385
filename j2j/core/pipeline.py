from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable, Coroutine
from typing import Any, TextIO

import click

from j2j.config.options import Options, resolve_options
from j2j.config.source import is_blank, normalize_source
from j2j.errors import CoercionError, EmptyInputError, J2JError
from j2j.evaluators import Evaluator, get_evaluator, load_builtin_evaluators
from .classifier import classify
from .serializer import output

logger = logging.getLogger("j2j")

Callback = Callable[[BaseException | None, Any], None]


def _evaluator_for(opts: Options, evaluator: Evaluator | None) -> Evaluator:
    if evaluator is not None:
        return evaluator
    load_builtin_evaluators()
    return get_evaluator(opts.engine, timeout=opts.timeout)


async def parse(source: str, opts: Options | dict | None = None, *, evaluator: Evaluator | None = None) -> Any:
    """Evaluate JS-like source text and return the JSON-able value it produced.

    The text is run as an expression, so ``{foo: 2 + 2}`` gives
    ``{"foo": 4}``. A bare word such as ``foo`` is a reference to an
    undefined variable and fails; quote it to get a string.
    """
    opts = resolve_options(opts)
    if is_blank(source):
        raise EmptyInputError()

    code = normalize_source(source)
    if opts.debug:
        logger.info("Executing:\n%s", code)

    engine = _evaluator_for(opts, evaluator)
    outcome = await asyncio.to_thread(engine.evaluate, code)

    if opts.debug:
        logger.info("Sandbox output:\n%s", outcome)
    return classify(outcome)


async def run(input: Any, opts: Options | dict | None = None, *, evaluator: Evaluator | None = None) -> str:
    """Evaluate and stringify ``input``.

    Anything that is not a string skips evaluation and is stringified as
    is, so this doubles as ``json.dumps`` with the same formatting rules.
    """
    if is_blank(input):
        raise EmptyInputError()
    opts = resolve_options(opts)
    if not isinstance(input, str):
        return output(input, opts)
    value = await parse(input, opts, evaluator=evaluator)
    return output(value, opts)


convert = run


async def write(
    input: Any,
    opts: Options | dict | None = None,
    *,
    stream: TextIO | None = None,
    evaluator: Evaluator | None = None,
) -> None:
    """Convert ``input`` and send it to ``opts.output`` or ``stream``."""
    opts = resolve_options(opts)
    target = stream or sys.stdout
    try:
        if is_blank(input):
            raise EmptyInputError()
        value = input if not isinstance(input, str) else await parse(input, opts, evaluator=evaluator)
        out = output(value, opts, target)
    except J2JError as exc:
        if opts.debug:
            logger.error("%s", exc)
        raise CoercionError() from exc

    if opts.output is not None:
        await asyncio.to_thread(opts.output.write_text, out, encoding="utf-8")
        logger.debug("wrote %d characters to %s", len(out), opts.output)
        return
    click.echo(out, file=target)


def _nodeify(coro: Coroutine[Any, Any, Any], callback: Callback) -> asyncio.Task | None:
    def finish(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            callback(exc, None)
        else:
            callback(None, task.result())

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is not None:
        task = loop.create_task(coro)
        task.add_done_callback(finish)
        return task

    try:
        result = asyncio.run(coro)
    except Exception as exc:
        callback(exc, None)
        return None
    callback(None, result)
    return None


def parse_with_callback(source: str, opts: Options | dict | None, callback: Callback, **kwargs: Any) -> asyncio.Task | None:
    return _nodeify(parse(source, opts, **kwargs), callback)


def convert_with_callback(input: Any, opts: Options | dict | None, callback: Callback, **kwargs: Any) -> asyncio.Task | None:
    return _nodeify(run(input, opts, **kwargs), callback)


def write_with_callback(input: Any, opts: Options | dict | None, callback: Callback, **kwargs: Any) -> asyncio.Task | None:
    return _nodeify(write(input, opts, **kwargs), callback)
