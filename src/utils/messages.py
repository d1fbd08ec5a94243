from textual.message import Message


class QuitRequestedMessage(Message):
    """
    broadcasted when the app is about to quit
    """

    bubble = True


class CartChangedMessage(Message):
    """
    Posted by cart entries after a line is edited or removed.
    Bubbles up to the cart screen, which rebuilds its list and total.
    """

    bubble = True
