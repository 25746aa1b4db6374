from .checks import ensure_same_length, ensure_length
from .measure import DistanceMeasure
from .permutation_tools import relabel, count_inversions, count_weighted_inversions


class KendallTauDistance(DistanceMeasure):
	"""Number of element pairs whose relative order differs between ``p1`` and
	``p2``.

	``p2`` is relabelled through the inverse of ``p1``, so that ``p1`` becomes
	the identity, and the inversions of the result are counted by merge sort
	in O(n log n). Equivalently, the minimum number of adjacent swaps turning
	``p1`` into ``p2``.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		return count_inversions(relabel(p1.to_array(),p2.to_array()))


	def max(self,length):
		if length <= 1:
			return 0
		return (length*(length-1)) >> 1


class WeightedKendallTauDistance(DistanceMeasure):
	"""Kendall tau distance with a weight per element.

	An inversion of elements ``a`` and ``b`` contributes
	``weights[a]*weights[b]`` rather than 1. The instance only supports
	permutations whose length equals the number of weights.

	Args:
		weights (list): A float weight for each element ``0,...,n-1``. The list
			is copied.

	"""
	def __init__(self,weights):
		self.weights = [float(w) for w in weights]
		total = 0.0
		running = 0.0
		for w in reversed(self.weights):
			total += w*running
			running += w
		self._max = total


	def supported_length(self):
		return len(self.weights)


	def distance(self,p1,p2):
		ensure_length(p1,len(self.weights),"p1")
		ensure_length(p2,len(self.weights),"p2")
		a2 = p2.to_array()
		relabelled = relabel(p1.to_array(),a2)
		# Weight of each relabelled element.
		w = [0.0]*len(relabelled)
		for r, v in zip(relabelled,a2):
			w[r] = self.weights[v]
		return count_weighted_inversions(relabelled,w)


	def max(self,length):
		"""The weighted distance between a permutation and its reverse.

		Raises:
			ValueError: if (length) is not the number of weights.

		"""
		if length != len(self.weights):
			raise ValueError("length must be {}, got {}".format(len(self.weights),length))
		return self._max
