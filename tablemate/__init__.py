"""Group availability matching and cuisine consensus for shared meals."""
