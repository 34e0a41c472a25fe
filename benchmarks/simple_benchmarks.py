from timeit import timeit

from tau.interpreter import Interpreter
from tau.types.symbol import Symbol
from tau.types.environment import Environment
from tau.reader.parser import read_str


def time_interpreter(code: str, rounds: int) -> float:
    """Time evaluation only: the form is read once and evaluated repeatedly
    against the same root environment.
    """
    itp = Interpreter()
    expr = read_str(code)
    # Warmup
    itp.eval(expr)
    # Timed
    return timeit(lambda: itp.eval(expr), number=rounds)


def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment(name="root")
    key = Symbol("answer")
    root.set(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.get(key)
    # Timed
    return timeit(lambda: env.get(key), number=n_lookups)


FN_APPLY_CODE = "((fn (x y) (+ x y)) 1 2)"

TAIL_RECURSION_CODE = r"""
(do
  (def fact (fn (n acc)
    (if (<= n 1)
        acc
        (fact (- n 1) (* n acc)))))
  (fact 100 1))
"""

# Sum 1..N through the trampoline
ARITH_SUM_CODE = r"""
(do
  (def sum-n (fn (n acc)
    (if (<= n 0)
        acc
        (sum-n (- n 1) (+ acc n)))))
  (sum-n 500 0))
"""

# Macro expansion on every iteration
MACRO_LOOP_CODE = r"""
(do
  (defmacro unless (c a b) `(if ~c ~b ~a))
  (def count-up (fn (n acc)
    (unless (<= n 0) (count-up (- n 1) (+ acc 1)) acc)))
  (count-up 200 0))
"""

# Host math forwarded as primitives
MATH_SQRT_CODE = r"""
(do
  (def sqrt-acc (fn (n acc)
    (if (<= n 0)
        acc
        (sqrt-acc (- n 1) (+ acc (sqrt n))))))
  (sqrt-acc 200 0))
"""


def _print_result(name: str, code: str, rounds: int) -> None:
    print(f"Benchmark: {name}")
    print(f"  interpreter: {time_interpreter(code, rounds):.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_result("fn application", FN_APPLY_CODE, rounds=20000)
    _print_result("tail recursion (factorial)", TAIL_RECURSION_CODE, rounds=500)
    _print_result("arithmetic sum 1..500 (tail-rec)", ARITH_SUM_CODE, rounds=1000)
    _print_result("macro expansion in a loop", MACRO_LOOP_CODE, rounds=200)
    _print_result("host math: sqrt loop", MATH_SQRT_CODE, rounds=200)
