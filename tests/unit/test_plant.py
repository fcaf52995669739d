import pytest

from photosynthesis.components import PlantStage, light_points, next_stage


@pytest.mark.parametrize(
    "stage, expected",
    [
        (PlantStage.SEED, PlantStage.SMALL),
        (PlantStage.SMALL, PlantStage.MEDIUM),
        (PlantStage.MEDIUM, PlantStage.LARGE),
        (PlantStage.LARGE, None),
    ],
)
def test_next_stage(stage: PlantStage, expected: PlantStage) -> None:
    assert next_stage(stage) == expected


def test_light_points_scale_with_stage() -> None:
    assert [light_points(s) for s in PlantStage] == [0, 1, 2, 3]
