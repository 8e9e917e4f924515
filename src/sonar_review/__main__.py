from sonar_review.main import cli

if __name__ == "__main__":
    cli(prog_name="sonar-review")
