from ..database import save_instance, update_instance


class Saveable:
    def save(self) -> None:
        """
        Save the instance to the database.
        """
        save_instance(self)

    def update(self) -> None:
        """
        Merge the instance's current state into the database.
        """
        update_instance(self)
