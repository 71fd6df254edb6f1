from seqtools import (
    Context, ConsoleLogger, MetricsRegistry, Seq, use_context,
    chunk, try_chunk, group_by, take_while, skip_while,
)


def main() -> None:
    words = ["foo", "bar", "aba", "z", "45"]
    print("take_while:", take_while(words, lambda w: len(w) == 3))
    print("skip_while:", skip_while(words, lambda w: len(w) == 3))
    print("group_by:", group_by(["a", "aa", "b", "bbb"], len))

    r = chunk([1, 2, 3, 4, 5], 3)
    print("chunks:", r.chunks, "total:", r.total, "remainder:", r.remainder)
    print("invalid size:", try_chunk([1, 2, 3], 0))

    print("fluent:", Seq.of(1, 2, 3, 4).filter(lambda x: x % 2 == 0).map(str).to_list())

    metrics = MetricsRegistry()
    ctx = (Context()
           .with_service(ConsoleLogger, ConsoleLogger(level="DEBUG"))
           .with_service(MetricsRegistry, metrics))
    with use_context(ctx):
        chunk(list(range(10)), 4)
    print("chunk calls:", metrics.value("seqtools_calls_total", [("op", "chunk")]))


if __name__ == "__main__":
    main()
