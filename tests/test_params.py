"""Tests for the param DSL parser."""

import pytest

from namerec.dbparam import BoolOperator
from namerec.dbparam import Comparison
from namerec.dbparam import Group
from namerec.dbparam import Like
from namerec.dbparam import Not
from namerec.dbparam import ParamOperator
from namerec.dbparam import ParamToken
from namerec.dbparam import escape_param
from namerec.dbparam import parse_param
from namerec.dbparam.params import parse_param_token
from namerec.dbparam.params import tokenize_param
from namerec.dbparam.params.parser import normalize_empty_value
from namerec.dbparam.params.parser import parse_param_operator

EQ = ParamOperator.EQ
NE = ParamOperator.NE


def empty(column: str) -> Group:
    """Expected condition for ':empty:'."""
    return Group(BoolOperator.OR, (Comparison(EQ, column, None), Comparison(EQ, column, '')))


def any_of(*conditions: object) -> Group:
    return Group(BoolOperator.OR, conditions)


# ========== Basic params ==========


def test_single_value() -> None:
    """Test a plain value is an equality in an 'or' group."""
    assert parse_param('status', 'active') == any_of(Comparison(EQ, 'status', 'active'))


def test_and_group() -> None:
    """Test a leading 'and' joins all values."""
    assert parse_param('status', 'and,active,!=disabled') == Group(
        BoolOperator.AND,
        (Comparison(EQ, 'status', 'active'), Comparison(NE, 'status', 'disabled')),
    )


def test_or_is_default() -> None:
    """Test several values without a prefix are joined with 'or'."""
    assert parse_param('status', 'active, pending') == any_of(
        Comparison(EQ, 'status', 'active'),
        Comparison(EQ, 'status', 'pending'),
    )


@pytest.mark.parametrize('prefix', ['or', 'OR', 'Or'])
def test_explicit_or_any_case(prefix: str) -> None:
    """Test the boolean prefix is case-insensitive."""
    assert parse_param('status', f'{prefix},active') == any_of(Comparison(EQ, 'status', 'active'))


def test_and_prefix_any_case() -> None:
    """Test an uppercase 'AND' is recognized."""
    condition = parse_param('status', 'AND,a,b')
    assert isinstance(condition, Group)
    assert condition.operator == BoolOperator.AND


def test_list_input() -> None:
    """Test lists are used as they are, without splitting on commas."""
    assert parse_param('name', ['and', 'a,b', '!=c']) == Group(
        BoolOperator.AND,
        (Comparison(EQ, 'name', 'a,b'), Comparison(NE, 'name', 'c')),
    )


def test_non_string_values() -> None:
    """Test non-string values compare with '=' as they are."""
    assert parse_param('id', 5) == any_of(Comparison(EQ, 'id', 5))
    assert parse_param('id', [1, 2]) == any_of(Comparison(EQ, 'id', 1), Comparison(EQ, 'id', 2))


@pytest.mark.parametrize('value', ['', None, [], 'not ', ' , '])
def test_no_values_gives_none(value: object) -> None:
    """Test params without values give no condition."""
    assert parse_param('status', value) is None


def test_and_prefix_alone_gives_none() -> None:
    """Test a boolean prefix without values gives no condition."""
    assert parse_param('status', 'and') is None


def test_none_in_list_is_empty() -> None:
    """Test None list items mean ':empty:'."""
    assert parse_param('x', [None]) == any_of(empty('x'))


# ========== Operators ==========


@pytest.mark.parametrize(
    ('value', 'operator', 'text'),
    [
        ('=5', ParamOperator.EQ, '5'),
        ('!=5', ParamOperator.NE, '5'),
        ('not 5', ParamOperator.NE, '5'),
        ('NOT 5', ParamOperator.NE, '5'),
        ('<5', ParamOperator.LT, '5'),
        ('<=5', ParamOperator.LE, '5'),
        ('>5', ParamOperator.GT, '5'),
        ('>=5', ParamOperator.GE, '5'),
        ('5', ParamOperator.EQ, '5'),
        ('note', ParamOperator.EQ, 'note'),
    ],
)
def test_operators(value: str, operator: ParamOperator, text: str) -> None:
    """Test leading operators are recognized and stripped."""
    assert parse_param('n', value) == any_of(Comparison(operator, 'n', text))


def test_parse_param_operator_keeps_case_of_rest() -> None:
    """Test only the operator is matched case-insensitively."""
    assert parse_param_operator('NOT Active') == (ParamOperator.NE, 'Active')
    assert parse_param_operator('>= 10') == (ParamOperator.GE, ' 10')


def test_range() -> None:
    """Test an 'and' range."""
    assert parse_param('logins', 'and,>=10,<20') == Group(
        BoolOperator.AND,
        (Comparison(ParamOperator.GE, 'logins', '10'), Comparison(ParamOperator.LT, 'logins', '20')),
    )


def test_value_whitespace_trimmed() -> None:
    """Test whitespace between operator and value is trimmed."""
    assert parse_param('n', '>= 10') == any_of(Comparison(ParamOperator.GE, 'n', '10'))


# ========== Wildcards ==========


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        ('*oo*', Like('name', '%oo%')),
        ('j*', Like('name', 'j%')),
        ('*son', Like('name', '%son')),
        ('!=*son', Like('name', '%son', negated=True)),
        ('not j*', Like('name', 'j%', negated=True)),
        ('foo*bar', Comparison(EQ, 'name', 'foo*bar')),
        ('foo\\*', Comparison(EQ, 'name', 'foo*')),
        ('\\*foo', Comparison(EQ, 'name', '*foo')),
        ('>*foo', Comparison(ParamOperator.GT, 'name', '*foo')),
    ],
)
def test_wildcards(value: str, expected: object) -> None:
    """Test leading and unescaped trailing asterisks make LIKE conditions."""
    assert parse_param('name', value) == any_of(expected)


def test_like_is_case_insensitive() -> None:
    """Test LIKE conditions are case-insensitive."""
    condition = parse_param('name', '*oo*')
    assert isinstance(condition, Group)
    like = condition.conditions[0]
    assert isinstance(like, Like)
    assert like.pattern == '%oo%'
    assert like.case_sensitive is False


# ========== Escaping ==========


def test_escape_param() -> None:
    """Test commas and asterisks are escaped."""
    assert escape_param('a,b*c') == 'a\\,b\\*c'
    assert escape_param('plain') == 'plain'


@pytest.mark.parametrize('value', ['a,b*c', '*', 'x,', '*start', 'end*', 'a, b, c'])
def test_escaped_param_is_single_literal(value: str) -> None:
    """Test an escaped value parses to one literal equality."""
    assert parse_param('c', escape_param(value)) == any_of(Comparison(EQ, 'c', value.strip()))


def test_escaped_comma_in_list() -> None:
    """Test escaped commas do not split values."""
    assert parse_param('c', 'a\\,b,c') == any_of(Comparison(EQ, 'c', 'a,b'), Comparison(EQ, 'c', 'c'))


# ========== Empty values ==========


@pytest.mark.parametrize('value', [':empty:', ':EMPTY:', '=:empty:'])
def test_empty(value: str) -> None:
    """Test ':empty:' matches NULL or empty string."""
    assert parse_param('x', value) == any_of(empty('x'))


@pytest.mark.parametrize('value', ['not :empty:', ':notempty:', ':NotEmpty:', '!=:empty:'])
def test_not_empty(value: str) -> None:
    """Test negated empty sentinels."""
    assert parse_param('x', value) == any_of(Not(empty('x')))


def test_empty_mixed_with_values() -> None:
    """Test sentinels combine with other values."""
    assert parse_param('x', 'and,:notempty:,!=foo') == Group(
        BoolOperator.AND,
        (Not(empty('x')), Comparison(NE, 'x', 'foo')),
    )


def test_normalize_empty_value() -> None:
    """Test None and ':notempty:' normalization."""
    assert normalize_empty_value(None) == ':empty:'
    assert normalize_empty_value(':NOTEMPTY:') == 'not :empty:'
    assert normalize_empty_value('x') == 'x'
    assert normalize_empty_value(0) == 0


# ========== Tokens ==========


def test_tokenize_param() -> None:
    """Test boolean prefix extraction."""
    assert tokenize_param('and,a,b') == (BoolOperator.AND, ['a', 'b'])
    assert tokenize_param('a,b') == (None, ['a', 'b'])
    assert tokenize_param(['or']) == (BoolOperator.OR, [])
    assert tokenize_param([1, 'and']) == (None, [1, 'and'])


def test_parse_param_token() -> None:
    """Test single value parsing."""
    assert parse_param_token('!=foo') == ParamToken(NE, 'foo')
    assert parse_param_token(':empty:') == ParamToken(EQ, ':empty:', is_empty=True)
    assert parse_param_token(':notempty:') == ParamToken(NE, ':empty:', is_not_empty=True)
    assert parse_param_token(None) == ParamToken(EQ, ':empty:', is_empty=True)
    assert parse_param_token(3) == ParamToken(EQ, 3)


def test_conditions_are_immutable() -> None:
    """Test condition nodes cannot be changed after parsing."""
    condition = parse_param('status', 'active')
    with pytest.raises(AttributeError):
        condition.operator = BoolOperator.AND  # type: ignore[misc, union-attr]
