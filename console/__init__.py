"""Console front end for the card trick."""
