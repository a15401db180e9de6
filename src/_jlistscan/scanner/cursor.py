from abc import ABC, abstractmethod


class Cursor(ABC):
    """
    The host's view of the character stream, as seen by the scanner.

    The cursor has a current position and a lookahead character. Characters
    are consumed either as part of the token (advance) or as trivia (skip)
    and the end of the token can be fixed at the current position with
    mark_end. If mark_end is never called, the token ends at the current
    position.

    On top of these host primitives a cursor must support rewinding with
    tell and seek: the scanner rewinds after declining, after a partial
    digraph such as "/=" and after an error, and leaves the cursor at the
    end of the token it emits.
    """

    @property
    @abstractmethod
    def lookahead(self):
        """
        The next character, or the empty string at the end of input.
        """
        pass

    @property
    @abstractmethod
    def column(self):
        """
        Column of the lookahead character, counted from 0.
        """
        pass

    @property
    def at_end(self):
        return self.lookahead == ""

    @abstractmethod
    def advance(self):
        pass

    @abstractmethod
    def skip(self):
        pass

    @abstractmethod
    def mark_end(self):
        pass

    @property
    @abstractmethod
    def token_start(self):
        pass

    @property
    @abstractmethod
    def token_end(self):
        pass

    @abstractmethod
    def tell(self):
        pass

    @abstractmethod
    def seek(self, position):
        """
        Move to the given position and start a new token there.
        """
        pass


class TextCursor(Cursor):
    """
    Cursor over text held in memory, positions and columns are
    counted in codepoints.

    >>> cursor = TextCursor("a\\n  b")
    >>> cursor.seek(4)
    >>> cursor.lookahead, cursor.column
    ('b', 2)

    """

    def __init__(self, text):
        """
        :param text: A string or a text stream.
        """
        if hasattr(text, "read"):
            text = text.read()
        self.text = text
        self._position = 0
        self._token_start = 0
        self._marked_end = None

    @property
    def lookahead(self):
        return self.text[self._position : self._position + 1]

    @property
    def column(self):
        return self._position - (self.text.rfind("\n", 0, self._position) + 1)

    def advance(self):
        if self._position < len(self.text):
            self._position += 1

    def skip(self):
        follow = self._token_start == self._position
        self.advance()
        # Trivia is only dropped from the front of a token
        if follow:
            self._token_start = self._position

    def mark_end(self):
        self._marked_end = self._position

    @property
    def token_start(self):
        return self._token_start

    @property
    def token_end(self):
        if self._marked_end is None:
            return self._position
        return self._marked_end

    def tell(self):
        return self._position

    def seek(self, position):
        if not 0 <= position <= len(self.text):
            raise ValueError(f"Position {position} is outside of the text")
        self._position = position
        self._token_start = position
        self._marked_end = None
