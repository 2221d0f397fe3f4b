"""Command-line front end that solves contest problems read from input.

The input starts with the number of test cases, followed by each case in
the problem's own format. Answers are printed one case per line.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from cpkit import contest_a, contest_b, practice_a, practice_b


class _Tokens:
    """Whitespace-separated tokens of the whole input."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _join(values: Iterable[object]) -> str:
    return " ".join(str(value) for value in values)


def _or_minus_one(value: object) -> str:
    if value is None:
        return "-1"
    if isinstance(value, (list, tuple)):
        return _join(value)
    return str(value)


def _yes_no(flag: bool, yes: str = "YES", no: str = "NO") -> str:
    return yes if flag else no


def _among(t: _Tokens) -> str:
    return contest_a.pluralize(t.word())


def _bench_olympiad(t: _Tokens) -> str:
    n, m, k = t.numbers(3)
    return str(contest_a.min_bench_length(n, m, k))


def _coin(t: _Tokens) -> str:
    return str(contest_a.coin_transform(t.number()))


def _fanum_easy(t: _Tokens) -> str:
    n, _m = t.numbers(2)
    a = t.numbers(n)
    b = t.number()
    return _yes_no(contest_a.can_sort_single(a, b))


def _fanum_hard(t: _Tokens) -> str:
    n, m = t.numbers(2)
    a = t.numbers(n)
    b = t.numbers(m)
    return _yes_no(contest_a.can_sort_multi(a, b))


def _lock(t: _Tokens) -> str:
    return _or_minus_one(contest_a.lock_permutation(t.number()))


def _mex(t: _Tokens) -> str:
    a = t.numbers(t.number())
    return str(contest_a.min_mex_operations(a))


def _mex_or(t: _Tokens) -> str:
    n, x = t.numbers(2)
    return _join(contest_a.mex_or_sequence(n, x))


def _new_world(t: _Tokens) -> str:
    n, k, p = t.numbers(3)
    return _or_minus_one(contest_a.min_operations(n, k, p))


def _olympiad_date(t: _Tokens) -> str:
    a = t.numbers(t.number())
    return str(contest_b.first_valid_prefix(a))


def _player_end(t: _Tokens) -> str:
    return _yes_no(contest_b.is_reachable(t.number()), "Yes", "No")


def _perfect_square_perm(t: _Tokens) -> str:
    return _or_minus_one(contest_b.square_free_prefix_permutation(t.number()))


def _segment_sum(t: _Tokens) -> str:
    values = contest_b.segment_values(t.numbers(t.number()))
    return f"{len(values)}\n{_join(values)}"


def _serval(t: _Tokens) -> str:
    _n, k = t.numbers(2)
    return _yes_no(contest_b.can_make_smaller(t.word(), k))


def _skibidus(t: _Tokens) -> str:
    return str(contest_b.min_length(t.word()))


def _square(t: _Tokens) -> str:
    l, r, d, u = t.numbers(4)
    return _yes_no(contest_b.is_square(l, r, d, u), "Yes", "No")


def _subseq(t: _Tokens) -> str:
    t.number()
    return str(contest_b.max_dash_subsequences(t.word()))


def _team_training(t: _Tokens) -> str:
    n, x = t.numbers(2)
    return str(contest_b.max_teams(t.numbers(n), x))


def _third_side(t: _Tokens) -> str:
    return str(contest_b.max_last_side(t.numbers(t.number())))


def _xor_triangle(t: _Tokens) -> str:
    return _or_minus_one(contest_b.xor_triangle_partner(t.number()))


def _basketball(t: _Tokens) -> str:
    n, d = t.numbers(2)
    return str(practice_a.basketball_wins(t.numbers(n), d))


def _bw_stripe(t: _Tokens) -> str:
    _n, k = t.numbers(2)
    return str(practice_a.min_recolor(t.word(), k))


def _dist_split(t: _Tokens) -> str:
    t.number()
    return str(practice_a.max_distinct_split(t.word()))


def _helmet(t: _Tokens) -> str:
    n, p = t.numbers(2)
    capacities = t.numbers(n)
    costs = t.numbers(n)
    return str(practice_a.min_announcement_cost(p, capacities, costs))


def _lcm(t: _Tokens) -> str:
    return _join(practice_a.min_lcm_pair(t.number()))


def _luke(t: _Tokens) -> str:
    n, x = t.numbers(2)
    return str(practice_a.min_changes(t.numbers(n), x))


def _merge_array(t: _Tokens) -> str:
    n = t.number()
    a = t.numbers(n)
    b = t.numbers(n)
    return str(practice_a.longest_equal_run(a, b))


def _monsters(t: _Tokens) -> str:
    n, k = t.numbers(2)
    return _join(practice_a.kill_order(t.numbers(n), k))


def _olya(t: _Tokens) -> str:
    arrays = [t.numbers(t.number()) for _ in range(t.number())]
    return str(practice_b.max_beauty(arrays))


def _pillar_bit(t: _Tokens) -> str:
    return _join(practice_b.min_cost_permutation(t.number()))


def _raspberries(t: _Tokens) -> str:
    n, k = t.numbers(2)
    return str(practice_b.min_ops_divisible(t.numbers(n), k))


def _rb_team(t: _Tokens) -> str:
    _n, r, b = t.numbers(3)
    return practice_b.team_string(r, b)


def _shoe_size(t: _Tokens) -> str:
    return _or_minus_one(practice_b.shuffle_shoes(t.numbers(t.number())))


def _ski_resort(t: _Tokens) -> str:
    n, k, q = t.numbers(3)
    return str(practice_b.count_vacations(t.numbers(n), k, q))


def _swap_delete(t: _Tokens) -> str:
    return str(practice_b.min_cost(t.word()))


def _traffic(t: _Tokens) -> str:
    t.number()
    c = t.word()
    return str(practice_b.max_wait(t.word(), c))


_PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "among": _among,
    "bench-olympiad": _bench_olympiad,
    "coin": _coin,
    "fanum-easy": _fanum_easy,
    "fanum-hard": _fanum_hard,
    "lock": _lock,
    "mex": _mex,
    "mex-or": _mex_or,
    "new-world": _new_world,
    "olympiad-date": _olympiad_date,
    "player-end": _player_end,
    "perfect-square-perm": _perfect_square_perm,
    "segment-sum": _segment_sum,
    "serval": _serval,
    "skibidus": _skibidus,
    "square": _square,
    "subseq": _subseq,
    "team-training": _team_training,
    "third-side": _third_side,
    "xor-triangle": _xor_triangle,
    "basketball": _basketball,
    "bw-stripe": _bw_stripe,
    "dist-split": _dist_split,
    "helmet": _helmet,
    "lcm": _lcm,
    "luke": _luke,
    "merge-array": _merge_array,
    "monsters": _monsters,
    "olya": _olya,
    "pillar-bit": _pillar_bit,
    "raspberries": _raspberries,
    "rb-team": _rb_team,
    "shoe-size": _shoe_size,
    "ski-resort": _ski_resort,
    "swap-delete": _swap_delete,
    "traffic": _traffic,
}

# Problems whose input is a single case, with no leading case count.
_SINGLE_CASE = frozenset({"basketball"})


def _run(problem: str, text: str) -> str:
    tokens = _Tokens(text)
    solver = _PROBLEMS[problem]
    cases = 1 if problem in _SINGLE_CASE else tokens.number()
    answers = [solver(tokens) for _ in range(cases)]
    return "".join(f"{answer}\n" for answer in answers)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the named problem for every case in the input and print answers."""
    parser = argparse.ArgumentParser(
        prog="cpkit",
        description="Solve a contest problem for each test case read from input.",
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="input file (default: standard input)",
    )
    args = parser.parse_args(argv)
    with args.input as source:
        text = source.read()
    try:
        output = _run(args.problem, text)
    except ValueError as error:
        print(f"cpkit: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())