"""Positional distance measures.

All of these compare where each element sits in ``p1`` and in ``p2`` and run
in linear time.

"""
from .checks import ensure_same_length
from .measure import DistanceMeasure


class ExactMatchDistance(DistanceMeasure):
	"""Number of positions at which ``p1`` and ``p2`` differ (Hamming)."""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		return sum(1 for a, b in zip(p1.to_array(),p2.to_array()) if a != b)


	def max(self,length):
		if length <= 1:
			return 0
		return length


class DeviationDistance(DistanceMeasure):
	"""Sum over elements of the absolute difference of their positions in
	``p1`` and ``p2``.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		inv2 = p2.get_inverse()
		return sum(abs(inv2[v]-i) for i, v in enumerate(p1.to_array()))


	def max(self,length):
		if length <= 1:
			return 0
		return (length*length - (length & 1)) >> 1


class DeviationDistanceNormalized(DistanceMeasure):
	"""Deviation distance divided by ``n-1``, as defined by Ronald (1998)."""
	def __init__(self):
		self.deviation = DeviationDistance()


	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		if len(p1) <= 1:
			return 0.0
		return self.deviation.distance(p1,p2)/(len(p1)-1)


	def max(self,length):
		if length <= 1:
			return 0.0
		return (length*length - (length & 1))/(2.0*(length-1))


class DeviationDistanceNormalized2005(DistanceMeasure):
	"""Deviation distance scaled by its maximum into ``[0, 1]``, as defined by
	Sevaux and Sorensen (2005).
	"""
	def __init__(self):
		self.deviation = DeviationDistance()


	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		n = len(p1)
		if n <= 1:
			return 0.0
		return self.deviation.distance(p1,p2)*2.0/(n*n - (n & 1))


	def max(self,length):
		if length <= 1:
			return 0.0
		return 1.0


class SquaredDeviationDistance(DistanceMeasure):
	"""Like ``DeviationDistance``, with each term squared."""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		inv2 = p2.get_inverse()
		total = 0
		for i, v in enumerate(p1.to_array()):
			dev = inv2[v] - i
			total += dev*dev
		return total


	def max(self,length):
		if length <= 1:
			return 0
		return (length*length*length - length) // 3


class LeeDistance(DistanceMeasure):
	"""Cyclic deviation distance.

	Each element contributes ``min(dev, n-dev)``, where dev is the absolute
	difference of its positions, so positions wrap around.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		n = len(p1)
		if n <= 1:
			return 0
		inv1 = p1.get_inverse()
		inv2 = p2.get_inverse()
		total = 0
		for a, b in zip(inv1,inv2):
			dev = abs(a-b)
			total += min(dev,n-dev)
		return total


	def max(self,length):
		if length <= 1:
			return 0
		return length*(length >> 1)


class ScrambleDistance(DistanceMeasure):
	"""0 if the permutations are equal, 1 otherwise."""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		if p1 == p2:
			return 0
		return 1


	def max(self,length):
		if length <= 1:
			return 0
		return 1
