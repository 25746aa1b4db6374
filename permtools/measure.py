class DistanceMeasure(object):
	"""Base class for permutation distance measures.

	A measure is a stateless object computing ``distance(p1, p2)`` for two
	``Permutation`` objects without modifying them. Measures that know the
	largest distance possible between permutations of a given length override
	``max``, which in turn enables ``normalized_distance``. Measures are also
	callable, as a shorthand for ``distance``.

	"""
	def distance(self,p1,p2):
		raise NotImplementedError


	def __call__(self,p1,p2):
		return self.distance(p1,p2)


	def max(self,length):
		"""The largest distance over all pairs of permutations of (length).

		Raises:
			NotImplementedError: if the measure defines no such bound.

		"""
		raise NotImplementedError("{} does not define a maximum distance".format(type(self).__name__))


	def normalized_distance(self,p1,p2):
		"""``distance(p1, p2)`` scaled by ``max(len(p1))`` into ``[0, 1]``.

		Returns 0.0 when the maximum is 0.
		"""
		m = self.max(len(p1))
		if m == 0:
			return 0.0
		return self.distance(p1,p2)/m
