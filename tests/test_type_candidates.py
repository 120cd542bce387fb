import pytest

from csv2pydantic.inference.type_candidates import TypeCandidate


def test_priority_order_is_narrowest_first():
    assert [c.value for c in TypeCandidate.all()] == [
        "U8", "U16", "U32", "U64", "U128",
        "I8", "I16", "I32", "I64", "I128",
        "F32", "F64", "str",
    ]
    assert [c.priority for c in TypeCandidate.all()] == list(range(13))


def test_type_names():
    results = [(c.type_name(False), c.type_name(True)) for c in TypeCandidate.all()]

    assert results[0] == ("U8", "Optional[U8]")
    assert results[9] == ("I128", "Optional[I128]")
    assert results[11] == ("F64", "Optional[F64]")
    assert results[12] == ("str", "Optional[str]")


@pytest.mark.parametrize(
    "candidate, token, expected",
    [
        (TypeCandidate.U8, "0", True),
        (TypeCandidate.U8, "255", True),
        (TypeCandidate.U8, "+7", True),
        (TypeCandidate.U8, "256", False),
        (TypeCandidate.U8, "-1", False),
        (TypeCandidate.U8, "1.0", False),
        (TypeCandidate.U8, " 1", False),
        (TypeCandidate.U8, "1_0", False),
        (TypeCandidate.U16, "65535", True),
        (TypeCandidate.U16, "65536", False),
        (TypeCandidate.U128, str(2 ** 128 - 1), True),
        (TypeCandidate.U128, str(2 ** 128), False),
        (TypeCandidate.I8, "-128", True),
        (TypeCandidate.I8, "127", True),
        (TypeCandidate.I8, "128", False),
        (TypeCandidate.I32, "-2147483649", False),
        (TypeCandidate.I128, str(-(2 ** 127)), True),
        (TypeCandidate.I128, "abc", False),
        (TypeCandidate.F32, "1.5", True),
        (TypeCandidate.F32, "-2e10", True),
        (TypeCandidate.F32, "1e39", False),
        (TypeCandidate.F32, "inf", True),
        (TypeCandidate.F32, "NaN", True),
        (TypeCandidate.F32, "1_000.5", False),
        (TypeCandidate.F64, "1e39", True),
        (TypeCandidate.F64, ".5", True),
        (TypeCandidate.F64, "1.5.2", False),
        (TypeCandidate.STRING, "anything at all", True),
    ],
)
def test_can_parse(candidate, token, expected):
    assert candidate.can_parse(token) is expected


def test_string_accepts_every_token():
    for token in ("", " ", "1", "x,y", "é"):
        assert TypeCandidate.STRING.can_parse(token)


@pytest.mark.parametrize("token", ["1" * 5000, "-" + "9" * 5000, "+" + "1" * 41])
def test_oversized_integers_fall_through_to_float(token):
    integers = [c for c in TypeCandidate.all() if c.name[0] in "UI"]

    assert not any(c.can_parse(token) for c in integers)
    assert TypeCandidate.F64.can_parse(token)


def test_leading_zeros_do_not_count_as_digits():
    token = "0" * 5000 + "7"

    assert TypeCandidate.U8.can_parse(token)
    assert TypeCandidate.I8.can_parse("-" + token)
