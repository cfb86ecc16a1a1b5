import typing as _ty


class Symbol(_ty.NamedTuple):
    new_line_carriage_return: str
    new_line: str
    carriage_return: str
    empty_string: str
    whitespace: str
    equals: str
    comma: str
    hyphen: str
    slash: str
    semicolon: str
    colon: str
    number_sign: str
    opening_square_bracket: str
    closing_square_bracket: str
    opening_curly_bracket: str
    closing_curly_bracket: str
    quotation_mark: str
    underscore: str
    single_quote: str
    percent: str
    exclamation_mark: str
    dollar: str
    ampersand: str
    opening_bracket: str
    closing_bracket: str
    asterisk: str
    plus: str
    question_mark: str
    at: str


SYMBOL = Symbol(
    new_line_carriage_return="\r\n",
    new_line="\n",
    carriage_return="\r",
    empty_string="",
    whitespace=" ",
    equals="=",
    comma=",",
    hyphen="-",
    slash="/",
    semicolon=";",
    colon=":",
    number_sign="#",
    opening_square_bracket="[",
    closing_square_bracket="]",
    opening_curly_bracket="{",
    closing_curly_bracket="}",
    quotation_mark='"',
    underscore="_",
    single_quote="'",
    percent="%",
    exclamation_mark="!",
    dollar="$",
    ampersand="&",
    opening_bracket="(",
    closing_bracket=")",
    asterisk="*",
    plus="+",
    question_mark="?",
    at="@",
)

# Percent must stay first: every later code introduces a "%" of its own.
ESCAPES: _ty.Sequence[tuple[str, str]] = (
    (SYMBOL.percent, "%25"),
    (SYMBOL.whitespace, "%20"),
    (SYMBOL.carriage_return, "%0D"),
    (SYMBOL.new_line, "%0A"),
    (SYMBOL.exclamation_mark, "%21"),
    (SYMBOL.quotation_mark, "%22"),
    (SYMBOL.number_sign, "%23"),
    (SYMBOL.dollar, "%24"),
    (SYMBOL.ampersand, "%26"),
    (SYMBOL.single_quote, "%27"),
    (SYMBOL.opening_bracket, "%28"),
    (SYMBOL.closing_bracket, "%29"),
    (SYMBOL.asterisk, "%2A"),
    (SYMBOL.plus, "%2B"),
    (SYMBOL.comma, "%2C"),
    (SYMBOL.slash, "%2F"),
    (SYMBOL.colon, "%3A"),
    (SYMBOL.semicolon, "%3B"),
    (SYMBOL.equals, "%3D"),
    (SYMBOL.at, "%40"),
    (SYMBOL.opening_square_bracket, "%5B"),
    (SYMBOL.closing_square_bracket, "%5D"),
)

# Recognised when decoding, never produced when encoding.
DECODE_ONLY: _ty.Sequence[tuple[str, str]] = ((SYMBOL.question_mark, "%3F"),)
