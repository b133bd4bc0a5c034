"""Mixins that give GeneralizedMap its traversal, embedding, sewing and validation methods."""
