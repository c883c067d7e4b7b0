from typing import Dict

from filmorate.api.mpa.schemas import Mpa

MPA_RATINGS = (
    ("G", "у фильма нет возрастных ограничений"),
    ("PG", "детям рекомендуется смотреть фильм с родителями"),
    ("PG-13", "детям до 13 лет просмотр не желателен"),
    ("R", "лицам до 17 лет просматривать фильм можно только в присутствии взрослого"),
    ("NC-17", "лицам до 18 лет просмотр запрещён"),
)


def default_mpa() -> Dict[int, Mpa]:
    """Предустановленные рейтинги MPA, ID начинаются с 1 в порядке MPA_RATINGS."""
    return {
        mpa_id: Mpa(id=mpa_id, name=name, description=description)
        for mpa_id, (name, description) in enumerate(MPA_RATINGS, start=1)
    }
