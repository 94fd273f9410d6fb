from view import ViewWrapper


class IdView(ViewWrapper):
    """Gives the wrapped view a name reachable through `Selector.by_id`."""

    def __init__(self, id: str, view):
        super().__init__(view)
        if not id:
            raise ValueError("IdView needs a non-empty id")
        self.id = id

    def find(self, selector):
        if selector.is_id and selector.value == self.id:
            return self.view
        return super().find(selector)

    def __repr__(self):
        return f"IdView({self.id!r}, {self.view!r})"
