"""Distance measures over the adjacencies (edges) of permutations.

A permutation is read as a path through its elements, or as a tour for the
cyclic variants which also join the last element to the first. R-type
measures treat these edges as directed; edge measures as undirected. Each
measure counts the edges of ``p1`` missing from ``p2``.

"""
from .checks import ensure_same_length
from .measure import DistanceMeasure


def _successors(perm,cyclic):
	"""Map each element of (perm) to the element following it, or -1 for the
	last element of an acyclic path.
	"""
	n = len(perm)
	successors = [-1]*n
	for i in range(n-1):
		successors[perm[i]] = perm[i+1]
	if cyclic and n > 0:
		successors[perm[n-1]] = perm[0]
	return successors


class RTypeDistance(DistanceMeasure):
	"""Number of directed adjacencies of ``p1`` that are not adjacencies of
	``p2`` (Campos et al., 2005).
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		a1 = p1.to_array()
		successors2 = _successors(p2.to_array(),False)
		return sum(1 for i in range(len(a1)-1) if a1[i+1] != successors2[a1[i]])


	def max(self,length):
		if length <= 1:
			return 0
		return length - 1


class CyclicRTypeDistance(DistanceMeasure):
	"""R-type distance with the wrap-around edge from last to first."""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		a1 = p1.to_array()
		n = len(a1)
		successors2 = _successors(p2.to_array(),True)
		return sum(1 for i in range(n) if a1[(i+1) % n] != successors2[a1[i]])


	def max(self,length):
		if length <= 2:
			return 0
		return length


class AcyclicEdgeDistance(DistanceMeasure):
	"""Number of undirected adjacencies of ``p1`` that are not adjacencies of
	``p2``.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		a1 = p1.to_array()
		successors2 = _successors(p2.to_array(),False)
		count = 0
		for i in range(len(a1)-1):
			if a1[i+1] != successors2[a1[i]] and a1[i] != successors2[a1[i+1]]:
				count += 1
		return count


	def max(self,length):
		if length <= 2:
			return 0
		if length == 3:
			return 1
		return length - 1


class CyclicEdgeDistance(DistanceMeasure):
	"""Number of undirected edges of the tour ``p1`` missing from the tour
	``p2``.

	Invariant under rotating or reversing either permutation, which suits
	problems such as the symmetric TSP.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		a1 = p1.to_array()
		n = len(a1)
		successors2 = _successors(p2.to_array(),True)
		count = 0
		for i in range(n):
			j = (i+1) % n
			if a1[j] != successors2[a1[i]] and a1[i] != successors2[a1[j]]:
				count += 1
		return count


	def max(self,length):
		if length <= 3:
			return 0
		if length == 4:
			return 2
		return length
