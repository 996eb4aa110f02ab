"""
Golden knapsack instances with known optimal values.

FIXED_CASES carry their items inline; the generated suites carry the generator
parameters (item_count, avg_weight, seed) and are expanded with gen_items.
"""

from typing import Dict, Iterator, List, NamedTuple, Sequence

from classical.knapsack_dp import Item
from data.generator import gen_items


class KnapsackCase(NamedTuple):
    best_value: int
    max_weight: int
    items: List[Item]


class GeneratedCase(NamedTuple):
    best_value: int
    max_weight: int
    item_count: int
    avg_weight: int
    seed: int

    def build(self) -> KnapsackCase:
        return KnapsackCase(self.best_value, self.max_weight, gen_items(self.item_count, self.avg_weight, self.seed))


def _items(pairs) -> List[Item]:
    return [Item(w, v) for w, v in pairs]


FIXED_CASES: List[KnapsackCase] = [
    KnapsackCase(0, 5, _items([])),
    KnapsackCase(0, 0, _items([(1, 1), (2, 2), (3, 3)])),
    KnapsackCase(5, 5, _items([(1, 1), (2, 2), (3, 3)])),
    KnapsackCase(7, 7, _items([(1, 1), (4, 5), (6, 6)])),
    KnapsackCase(15, 10, _items([(2, 3), (3, 4), (4, 5), (5, 8)])),
    KnapsackCase(220, 50, _items([(10, 60), (20, 100), (30, 120)])),
]

SMALL_CASES: List[GeneratedCase] = [
    GeneratedCase(11782, 126, 13, 19, 298470443),
    GeneratedCase(11741, 126, 13, 19, 2942770775),
    GeneratedCase(11767, 126, 13, 19, 2337056925),
    GeneratedCase(12256, 124, 13, 19, 1159733202),
    GeneratedCase(11582, 127, 13, 19, 3197197766),
    GeneratedCase(11859, 126, 13, 19, 1598519539),
    GeneratedCase(13560, 131, 13, 20, 2363788283),
    GeneratedCase(11363, 120, 13, 18, 3276142926),
    GeneratedCase(12060, 124, 13, 19, 661475593),
    GeneratedCase(11326, 122, 13, 18, 2706605226),
    GeneratedCase(12069, 124, 13, 19, 121124069),
    GeneratedCase(12083, 128, 13, 19, 198282099),
    GeneratedCase(12307, 128, 13, 19, 4115812295),
    GeneratedCase(12037, 124, 13, 19, 124331330),
    GeneratedCase(12199, 129, 13, 19, 2376060647),
    GeneratedCase(11458, 122, 13, 18, 2268424193),
    GeneratedCase(14068, 131, 13, 20, 1083990070),
    GeneratedCase(11476, 120, 13, 18, 2431142120),
    GeneratedCase(14432, 130, 13, 20, 1352932079),
    GeneratedCase(11373, 120, 13, 18, 4082612256),
]

MID_CASES: List[GeneratedCase] = [
    GeneratedCase(117957, 1098, 51, 43, 545950422),
    GeneratedCase(110358, 1053, 53, 39, 3292394601),
    GeneratedCase(107152, 1018, 53, 38, 2200004422),
    GeneratedCase(113588, 1061, 50, 42, 486321110),
    GeneratedCase(107046, 1036, 54, 38, 2254707491),
    GeneratedCase(112075, 1061, 50, 42, 393433098),
    GeneratedCase(115908, 1083, 52, 41, 4016305763),
    GeneratedCase(111716, 1075, 50, 43, 3398840265),
    GeneratedCase(110444, 1047, 52, 40, 543285653),
    GeneratedCase(111798, 1042, 51, 40, 4257094173),
    GeneratedCase(116979, 1097, 50, 43, 220369618),
    GeneratedCase(112441, 1080, 54, 40, 2067318742),
    GeneratedCase(108468, 1054, 51, 41, 878212200),
    GeneratedCase(111800, 1086, 53, 40, 1032145022),
    GeneratedCase(107720, 1024, 53, 38, 1385597312),
    GeneratedCase(117036, 1084, 54, 40, 1615854086),
    GeneratedCase(116096, 1087, 53, 41, 4058702599),
    GeneratedCase(106020, 1019, 51, 39, 2577848314),
    GeneratedCase(110623, 1034, 51, 40, 3059485874),
    GeneratedCase(107184, 1014, 52, 39, 902457258),
]

BIG_CASES: List[GeneratedCase] = [
    GeneratedCase(9117870, 85839, 1013, 169, 2794198006),
    GeneratedCase(8695136, 82056, 1056, 155, 2899145875),
    GeneratedCase(8864184, 83093, 1010, 164, 3925242915),
    GeneratedCase(8567272, 80876, 1021, 158, 2933229649),
    GeneratedCase(9111983, 85411, 1003, 170, 1912002139),
    GeneratedCase(8799671, 82837, 1041, 159, 3533840663),
    GeneratedCase(9187872, 86310, 1035, 166, 3986533362),
    GeneratedCase(8540028, 80392, 1075, 149, 2666294446),
    GeneratedCase(8644940, 81020, 1000, 162, 211985912),
    GeneratedCase(9281826, 86835, 1092, 159, 3401883063),
    GeneratedCase(8682409, 81228, 1041, 156, 1296573887),
    GeneratedCase(8976213, 84260, 1047, 160, 1122115022),
    GeneratedCase(8736989, 82046, 1032, 159, 969166099),
    GeneratedCase(8471593, 80009, 1046, 152, 2909110692),
    GeneratedCase(9252982, 86905, 1042, 166, 4096498724),
    GeneratedCase(9408253, 87902, 1084, 162, 3200223221),
    GeneratedCase(8580549, 80860, 1057, 152, 318212205),
    GeneratedCase(8903048, 83612, 1012, 165, 1554383788),
    GeneratedCase(9391384, 87854, 1039, 169, 4083052429),
    GeneratedCase(9329217, 87608, 1056, 165, 1716552479),
]

SUITES: Dict[str, Sequence] = {
    "fixed": FIXED_CASES,
    "small": SMALL_CASES,
    "mid": MID_CASES,
    "big": BIG_CASES,
}


def iter_suite(name: str) -> Iterator[KnapsackCase]:
    try:
        cases = SUITES[name]
    except KeyError:
        raise KeyError(f"unknown suite {name!r}; expected one of {sorted(SUITES)}") from None
    for case in cases:
        yield case.build() if isinstance(case, GeneratedCase) else case
