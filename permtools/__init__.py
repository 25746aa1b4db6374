from .permutation import Permutation, PermutationIterator
from .measure import DistanceMeasure
from .cycle_distances import CycleDistance, InterchangeDistance, CycleEditDistance, KCycleDistance, BlockInterchangeDistance
from .inversion_distances import KendallTauDistance, WeightedKendallTauDistance
from .deviation_distances import ExactMatchDistance, DeviationDistance, DeviationDistanceNormalized, DeviationDistanceNormalized2005, SquaredDeviationDistance, LeeDistance, ScrambleDistance
from .edge_distances import RTypeDistance, CyclicRTypeDistance, AcyclicEdgeDistance, CyclicEdgeDistance
from .edit_distances import ReinsertionDistance, EditDistance
from .reversal_distance import ReversalDistance
from .adapters import NormalizedDistance, CyclicIndependentDistance, ReversalIndependentDistance, CyclicReversalIndependentDistance
from . import permutation_tools
