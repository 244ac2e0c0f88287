"""Creature daycare: track, train and breed a small collection of creatures."""
