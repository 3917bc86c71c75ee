"""User-facing copy in the supported languages."""

from dataclasses import dataclass

SUPPORTED_LANGUAGES = ("en", "es")


@dataclass(frozen=True)
class MessageCatalog:
    """Notification and motivational copy for one language."""

    added: str
    add_failed: str
    removed: str
    remove_failed: str
    reset_done: str
    reset_failed: str
    goal_set: str
    goal_reached: str
    motivation: tuple[str, str, str, str, str, str]
    empty_history: str
    loading: str

    def motivational(self, percentage: int) -> str:
        """Return encouragement for the current progress."""
        start, low, mid, high, close, done = self.motivation
        if percentage >= 100:
            return done
        if percentage >= 75:
            return close
        if percentage >= 50:
            return high
        if percentage >= 25:
            return mid
        if percentage > 0:
            return low
        return start


ENGLISH = MessageCatalog(
    added="+{amount}ml added",
    add_failed="Couldn't save that drink. Please try again.",
    removed="Removed {amount}ml",
    remove_failed="Couldn't remove that entry. Please try again.",
    reset_done="Today's progress has been reset",
    reset_failed="Couldn't reset today's progress. Please try again.",
    goal_set="Daily goal set to {goal}ml",
    goal_reached="Daily goal reached! Great job staying hydrated!",
    motivation=(
        "Let's start hydrating!",
        "Good start, keep sipping.",
        "A quarter of the way there!",
        "Halfway there, keep going!",
        "Almost there, just a little more!",
        "Goal reached! You're fully hydrated.",
    ),
    empty_history="No logs yet today. Drink up!",
    loading="Loading logs...",
)

SPANISH = MessageCatalog(
    added="+{amount}ml añadidos",
    add_failed="No se pudo guardar. Inténtalo de nuevo.",
    removed="Eliminados {amount}ml",
    remove_failed="No se pudo eliminar el registro. Inténtalo de nuevo.",
    reset_done="Se ha reiniciado el progreso de hoy",
    reset_failed="No se pudo reiniciar el progreso. Inténtalo de nuevo.",
    goal_set="Meta diaria: {goal}ml",
    goal_reached="¡Meta diaria alcanzada! ¡Buen trabajo!",
    motivation=(
        "¡Empecemos a hidratarnos!",
        "Buen comienzo, sigue bebiendo.",
        "¡Ya llevas un cuarto!",
        "¡Vas por la mitad, sigue así!",
        "¡Casi lo logras, un poco más!",
        "¡Meta cumplida! Estás bien hidratado.",
    ),
    empty_history="Aún no hay registros hoy. ¡A beber!",
    loading="Cargando registros...",
)

_CATALOGS = {"en": ENGLISH, "es": SPANISH}


def catalog_for(language: str) -> MessageCatalog:
    """Return the catalog for a language, falling back to English."""
    return _CATALOGS.get(language.lower(), ENGLISH)
