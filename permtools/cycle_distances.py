"""Distance measures built on the cycle decomposition relating two permutations.

Transforming ``p1`` into ``p2`` permutes the elements along a set of
disjoint cycles (see ``permutation_tools.cycle_lengths``). The measures here
count those cycles in different ways.

"""
from math import ceil
from .checks import ensure_same_length
from .measure import DistanceMeasure
from .permutation_tools import cycle_lengths


class CycleDistance(DistanceMeasure):
	"""Number of non-singleton permutation cycles relating ``p1`` and ``p2``.

	Maximal when every cycle is a transposition, giving ``n // 2``.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		return len(cycle_lengths(p1.to_array(),p2.to_array()))


	def max(self,length):
		return length >> 1


class InterchangeDistance(DistanceMeasure):
	"""Minimum number of pairwise swaps transforming ``p1`` into ``p2``.

	A cycle of length L needs L-1 swaps.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		return sum(L-1 for L in cycle_lengths(p1.to_array(),p2.to_array()))


	def max(self,length):
		if length <= 1:
			return 0
		return length - 1


class CycleEditDistance(DistanceMeasure):
	"""Minimum number of cycle operations transforming ``p1`` into ``p2``.

	This is 0 for equal permutations, 1 if they are related by a single
	non-singleton cycle, and 2 otherwise: any permutation can be reached from
	any other by at most two cycle operations.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		return len(cycle_lengths(p1.to_array(),p2.to_array(),stop_after=2))


	def max(self,length):
		if length >= 4:
			return 2
		if length >= 2:
			return 1
		return 0


class KCycleDistance(DistanceMeasure):
	"""Minimum number of cycle operations of length at most k.

	A cycle of length L counts as ``ceil((L-1)/(k-1))`` k-cycle operations.
	For k = 2 this is ``InterchangeDistance``.

	Note:
		The measure is a metric for k <= 4 only. For k >= 5 it is a
		semi-metric: the triangle inequality can fail.

	Args:
		k (int): The longest cycle allowed in a single operation; at least 2.

	"""
	def __init__(self,k):
		if k < 2:
			raise ValueError("k must be at least 2, got {}".format(k))
		self.k = k


	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		count = 0
		for L in cycle_lengths(p1.to_array(),p2.to_array()):
			if L > self.k:
				count += ceil((L-1)/(self.k-1))
			else:
				count += 1
		return count


	def max(self,length):
		return max(length >> 1, ceil((length-1)/(self.k-1)))


class BlockInterchangeDistance(DistanceMeasure):
	"""Minimum number of block interchanges transforming ``p1`` into ``p2``.

	A block interchange swaps two non-overlapping, not necessarily adjacent,
	blocks. The distance follows Christie (1996): the elements of ``p1`` are
	written in terms of their positions in ``p2``, padded with a sentinel 0
	at the front and ``n+1`` at the back, and the distance is
	``(n + 1 - c) / 2`` where c is the number of cycles of the resulting
	cycle graph.
	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		a1 = p1.to_array()
		n = len(a1)
		inv2 = p2.get_inverse()
		p = [0]*(n+2)
		inv = [0]*(n+2)
		for i in range(n):
			index = inv2[a1[i]] + 1
			p[index] = i + 1
			inv[i+1] = index
		# Sentinels.
		p[0] = inv[0] = 0
		p[n+1] = inv[n+1] = n + 1
		visited = [False]*(n+2)
		cycles = 0
		for i in range(n+1):
			if not visited[i]:
				cycles += 1
				j = i
				while not visited[j]:
					visited[j] = True
					j = p[inv[j+1]-1]
		return (n+1-cycles) // 2


	def max(self,length):
		return length >> 1
