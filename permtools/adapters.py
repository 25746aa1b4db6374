"""Measures derived from another measure.

Each adapter holds a reference to an inner ``DistanceMeasure`` and delegates
to it. The independence adapters express problems in which a permutation is
only defined up to rotation (a cyclic tour) and/or reversal (an undirected
tour): they minimise the inner distance over the rotations and/or reversal of
``p2``, working on copies so ``p2`` is never modified, and stop as soon as a
zero distance is found.

"""
from .measure import DistanceMeasure
from .permutation import Permutation


class NormalizedDistance(DistanceMeasure):
	"""The inner measure's normalized distance, as a measure in its own right.

	Args:
		measure (DistanceMeasure): A measure defining ``max``.

	"""
	def __init__(self,measure):
		self.measure = measure


	def distance(self,p1,p2):
		return self.measure.normalized_distance(p1,p2)


	def max(self,length):
		if self.measure.max(length) > 0:
			return 1.0
		return 0.0


class CyclicIndependentDistance(DistanceMeasure):
	"""Minimum inner distance over all rotations of ``p2``."""
	def __init__(self,measure):
		self.measure = measure


	def distance(self,p1,p2):
		return _min_over_rotations(self.measure,p1,Permutation(p2))


class ReversalIndependentDistance(DistanceMeasure):
	"""Minimum of the inner distance to ``p2`` and to ``p2`` reversed."""
	def __init__(self,measure):
		self.measure = measure


	def distance(self,p1,p2):
		result = self.measure.distance(p1,p2)
		if result > 0:
			reversed2 = Permutation(p2)
			reversed2.reverse()
			result = min(result,self.measure.distance(p1,reversed2))
		return result


class CyclicReversalIndependentDistance(DistanceMeasure):
	"""Minimum inner distance over all rotations of ``p2`` and of ``p2``
	reversed.
	"""
	def __init__(self,measure):
		self.measure = measure


	def distance(self,p1,p2):
		result = _min_over_rotations(self.measure,p1,Permutation(p2))
		if result > 0:
			reversed2 = Permutation(p2)
			reversed2.reverse()
			result = min(result,_min_over_rotations(self.measure,p1,reversed2))
		return result


def _min_over_rotations(measure,p1,p2):
	"""Minimum of (measure) from (p1) to the rotations of (p2).

	(p2) is rotated in place, one position at a time.
	"""
	result = measure.distance(p1,p2)
	for i in range(len(p2)-1):
		if result == 0:
			break
		p2.rotate(1)
		result = min(result,measure.distance(p1,p2))
	return result
