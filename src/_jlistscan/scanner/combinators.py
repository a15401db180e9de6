from _jlistscan.errors import TokenizationError


def one_of(*recognizers):
    """
    Try each recognizer at the same cursor position, eg. the symbolic and
    the digraph spelling of a connective.

    :param recognizers: Recognizers which rewind the cursor on failure.
    :returns: A recognizer yielding what the first successful recognizer
        yields, raising TokenizationError listing every failure if none
        matched.
    """

    def first_match():
        errors = []
        for recognizer in recognizers:
            try:
                yield from recognizer()
                return
            except TokenizationError as err:
                errors.append(str(err))

        raise TokenizationError(
            "No spelling matched, due to one of\n*" + ("\n*".join(errors))
        )

    return first_match


def repeated(recognizer):
    """
    Apply a recognizer until it fails, eg. to drop a run of whitespace
    in front of a connective.

    :param recognizer: Any recognizer.
    :returns: Recognizer that never fails itself.
    """

    def until_failure():
        try:
            while True:
                yield from recognizer()
        except TokenizationError:
            pass

    return until_failure
