VERSION = '1.0.0'
DESCRIPTION = 'A sample plugin that straightens typographic quotes in pasted text'
AUTHOR = 'autopaste'

QUOTES = str.maketrans({
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
})


class StraightQuotesPlugin:
    def __init__(self):
        self.name = "Straight Quotes Plugin"

    def on_paste(self, text):
        return text.translate(QUOTES)


def initialize():
    return StraightQuotesPlugin()
