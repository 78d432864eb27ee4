"""Sequences of named bindings ending in a projection.

A RuleBuilder collects steps; select() closes it into a Rule, which is an
ordinary parser. Steps run left to right against one cursor and see every
value bound before them:

    pair = (
        sequence("pair")
        .bind("key", identifier)
        .bind("_eq", item("="))
        .commit("value", number)
        .select(lambda b: (b.key, b.value))
    )

Step semantics (start = cursor position when the rule was entered):

    bind(n, p)      p fails recoverably   -> rewind to start, recoverable
    commit(n, p)    p fails recoverably   -> rewind to before p, [Rule(n)]
    maybe(n, p)     p fails recoverably   -> rewind to before p, bind None
    many(n, p)      p fails recoverably   -> rewind to before p, bind list
    let(n, f)       binds f(bindings); cannot fail
    where(f)        f false               -> rewind to start, recoverable
    require(f)      f false               -> [Guard], cursor stays
    end()           items remain          -> rewind to start, recoverable
    require_end()   items remain          -> [End], cursor stays

Any step whose parser fails unrecoverably appends Rule(n) to the trace
and the rule returns at once, without rewinding.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Protocol

from commitparse.syntax.cursor import Cursor
from commitparse.syntax.outcome import (
    END_OF_INPUT,
    GUARD,
    RECOVERABLE,
    Failure,
    Outcome,
    Parser,
    Reason,
    Success,
)
from commitparse.syntax.parser.combinators import optional, zero_or_more

__all__ = ["Bindings", "Rule", "RuleBuilder", "sequence"]


class Bindings(Mapping[str, object]):
    """Read-only view of the values bound so far in a rule.

    Supports both ``b["name"]`` and ``b.name`` (the latter for names not
    starting with an underscore). Each binding step produces
    a new Bindings; earlier views are never modified.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: dict[str, object] = dict(values) if values else {}

    def __getitem__(self, name: str) -> object:
        return self._values[name]

    def __getattr__(self, name: str) -> object:
        # Underscore names are reachable through b["_name"] only.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Bindings({self._values!r})"

    def extend(self, name: str, value: object) -> Bindings:
        """Return a new view with name bound to value (shadowing any earlier binding)."""
        return Bindings({**self._values, name: value})


class _Step(Protocol):
    def apply(
        self, cursor: Cursor[object], bindings: Bindings, start: Cursor[object]
    ) -> Bindings | Failure: ...


@dataclass(frozen=True, slots=True)
class _Bind:
    name: str
    parser: Parser[object, object]
    committed: bool = False

    def apply(
        self, cursor: Cursor[object], bindings: Bindings, start: Cursor[object]
    ) -> Bindings | Failure:
        mark = cursor.snapshot()
        outcome = self.parser(cursor)
        if isinstance(outcome, Success):
            return bindings.extend(self.name, outcome.value)
        if not outcome.is_recoverable:
            return outcome.with_frame(Reason.rule(self.name))
        if self.committed:
            cursor.restore(mark)
            return Failure.unrecoverable(Reason.rule(self.name), cursor.pos)
        cursor.restore(start)
        return outcome


@dataclass(frozen=True, slots=True)
class _Let:
    name: str
    function: Callable[[Bindings], object]

    def apply(
        self, cursor: Cursor[object], bindings: Bindings, start: Cursor[object]
    ) -> Bindings | Failure:
        return bindings.extend(self.name, self.function(bindings))


@dataclass(frozen=True, slots=True)
class _Where:
    predicate: Callable[[Bindings], bool]
    fatal: bool = False

    def apply(
        self, cursor: Cursor[object], bindings: Bindings, start: Cursor[object]
    ) -> Bindings | Failure:
        if self.predicate(bindings):
            return bindings
        if self.fatal:
            return Failure.unrecoverable(GUARD, cursor.pos)
        cursor.restore(start)
        return RECOVERABLE


@dataclass(frozen=True, slots=True)
class _End:
    fatal: bool = False

    def apply(
        self, cursor: Cursor[object], bindings: Bindings, start: Cursor[object]
    ) -> Bindings | Failure:
        if cursor.is_eof:
            return bindings
        if self.fatal:
            return Failure.unrecoverable(END_OF_INPUT, cursor.pos)
        cursor.restore(start)
        return RECOVERABLE


@dataclass(frozen=True, slots=True)
class Rule[T, R]:
    """A closed sequence: a parser built from steps and a projection.

    Attributes:
        steps: Steps in execution order
        projection: Builds the result from the final bindings
        name: Label used in logs and reprs (optional)
    """

    steps: tuple[_Step, ...]
    projection: Callable[[Bindings], R]
    name: str | None = None

    def __call__(self, cursor: Cursor[T]) -> Outcome[R]:
        start = cursor.snapshot()
        bindings = Bindings()
        for step in self.steps:
            result = step.apply(cursor, bindings, start)  # type: ignore[arg-type]
            if isinstance(result, Failure):
                return result
            bindings = result
        return Success(self.projection(bindings))

    def __repr__(self) -> str:
        return f"Rule({self.name or '<anonymous>'}, steps={len(self.steps)})"


@dataclass(frozen=True, slots=True)
class RuleBuilder[T]:
    """Immutable builder for Rule.

    Every method returns a new builder, so a common prefix can be shared
    between several rules.
    """

    steps: tuple[_Step, ...] = ()
    name: str | None = None

    def _with(self, step: _Step) -> RuleBuilder[T]:
        return RuleBuilder((*self.steps, step), self.name)

    def bind(self, name: str, parser: Parser[T, object]) -> RuleBuilder[T]:
        """Run parser and bind its value to name."""
        return self._with(_Bind(name, parser))  # type: ignore[arg-type]

    def commit(self, name: str, parser: Parser[T, object]) -> RuleBuilder[T]:
        """Like bind(), but a recoverable failure of parser becomes unrecoverable."""
        return self._with(_Bind(name, parser, committed=True))  # type: ignore[arg-type]

    def maybe(self, name: str, parser: Parser[T, object]) -> RuleBuilder[T]:
        """Bind parser's value, or None if it fails recoverably."""
        return self._with(_Bind(name, optional(parser)))  # type: ignore[arg-type]

    def many(self, name: str, parser: Parser[T, object]) -> RuleBuilder[T]:
        """Bind the list of values from applying parser zero or more times."""
        return self._with(_Bind(name, zero_or_more(parser)))  # type: ignore[arg-type]

    def let(self, name: str, function: Callable[[Bindings], object]) -> RuleBuilder[T]:
        """Bind name to function(bindings); consumes nothing."""
        return self._with(_Let(name, function))

    def where(self, predicate: Callable[[Bindings], bool]) -> RuleBuilder[T]:
        """Fail recoverably unless predicate(bindings) holds."""
        return self._with(_Where(predicate))

    def require(self, predicate: Callable[[Bindings], bool]) -> RuleBuilder[T]:
        """Fail unrecoverably unless predicate(bindings) holds."""
        return self._with(_Where(predicate, fatal=True))

    def end(self) -> RuleBuilder[T]:
        """Fail recoverably unless the input is exhausted."""
        return self._with(_End())

    def require_end(self) -> RuleBuilder[T]:
        """Fail unrecoverably unless the input is exhausted."""
        return self._with(_End(fatal=True))

    def select[R](self, projection: Callable[[Bindings], R]) -> Rule[T, R]:
        """Close the builder; the rule succeeds with projection(bindings)."""
        return Rule(self.steps, projection, self.name)


def sequence[T](name: str | None = None) -> RuleBuilder[T]:
    """Start an empty rule."""
    return RuleBuilder((), name)
